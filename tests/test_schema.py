"""
Tests for pack configuration and manifest models
"""
import json

import pytest
from pydantic import ValidationError

from texpacker.packing import Atlas, Heuristic, Node, Padding, Rect, TextureInfo
from texpacker.schema import AtlasManifest, PackConfig


class TestPackConfig:
    """Validation of packing options"""

    def test_defaults(self):
        config = PackConfig()
        assert config.atlas_size == 1024
        assert config.padding == 0
        assert config.heuristic is Heuristic.AREA

    def test_heuristic_from_string(self):
        assert PackConfig(heuristic="MaxOneAxis").heuristic is Heuristic.MAX_ONE_AXIS

    def test_invalid_heuristic(self):
        with pytest.raises(ValidationError) as exc:
            PackConfig(heuristic="guillotine")
        assert "guillotine" in str(exc.value)

    @pytest.mark.parametrize("kwargs", [
        {"atlas_size": 0},
        {"atlas_size": -64},
        {"padding": -1},
        {"rotate": True},
    ])
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValidationError):
            PackConfig(**kwargs)

    def test_config_is_frozen(self):
        config = PackConfig()
        with pytest.raises(ValidationError):
            config.padding = 4


class TestAtlasManifest:
    """Manifest built from packed atlases"""

    def test_from_atlases(self):
        texture = TextureInfo("sprites/hero.png", 30, 60, Padding(left=1, top=2, right=1, bottom=2))
        atlas = Atlas(64, 64, (Node(Rect(4, 0, 30, 60), texture),))

        manifest = AtlasManifest.from_atlases([atlas], ["out/atlas000.png"])
        doc = json.loads(manifest.model_dump_json())

        assert doc == {
            "atlases": [{
                "file": "atlas000.png",
                "width": 64,
                "height": 64,
                "frames": [{
                    "name": "sprites/hero.png",
                    "x": 4,
                    "y": 0,
                    "width": 30,
                    "height": 60,
                    "source_width": 32,
                    "source_height": 64,
                    "trim": {"left": 1, "top": 2, "right": 1, "bottom": 2},
                }],
            }]
        }

    def test_empty(self):
        assert AtlasManifest.from_atlases([], []).atlases == []
