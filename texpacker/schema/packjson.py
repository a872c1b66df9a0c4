"""
Pack schema: configuration and atlas manifest

PackConfig validates the packing options once, up front, so the packing core
never sees an unknown heuristic or a negative size.

The manifest lists every placed texture per atlas file:

    {
      "atlases": [
        {
          "file": "atlas000.png",
          "width": 256,
          "height": 256,
          "frames": [
            {"name": "hero.png", "x": 0, "y": 0, "width": 30, "height": 60,
             "source_width": 32, "source_height": 64,
             "trim": {"left": 1, "top": 2, "right": 1, "bottom": 2}}
          ]
        }
      ]
    }

Frame coordinates are the trimmed rectangle inside the atlas; "trim" holds
the border stripped from the source, so the source rectangle is recovered as
(x - left, y - top, source_width, source_height).
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Sequence

from pydantic import BaseModel, Field, ConfigDict, field_validator

from texpacker.packing.nodes import Atlas
from texpacker.packing.selector import Heuristic

#########################
# CONFIGURATION
#########################

class PackConfig(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    atlas_size: int = Field(1024, gt=0, description="Side of the square atlas in pixels (maximum texture size).")
    padding: int = Field(0, ge=0, description="Gap in pixels kept between neighbouring textures.")
    heuristic: Heuristic = Field(Heuristic.AREA, description="Best-fit scoring: 'area' or 'max_one_axis'.")

    @field_validator('heuristic', mode='before')
    @classmethod
    def parse_heuristic(cls, v):
        return Heuristic.parse(v)

#########################
# MANIFEST
#########################

class TrimModel(BaseModel):
    left: int = Field(0, ge=0)
    top: int = Field(0, ge=0)
    right: int = Field(0, ge=0)
    bottom: int = Field(0, ge=0)

class FrameModel(BaseModel):
    name: str = Field(..., description="Source identifier of the texture.")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    width: int = Field(..., gt=0, description="Trimmed width in the atlas.")
    height: int = Field(..., gt=0, description="Trimmed height in the atlas.")
    source_width: int = Field(..., gt=0)
    source_height: int = Field(..., gt=0)
    trim: TrimModel

class AtlasEntry(BaseModel):
    file: str = Field(..., description="Atlas image file name.")
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    frames: List[FrameModel]

class AtlasManifest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    atlases: List[AtlasEntry]

    @classmethod
    def from_atlases(cls, atlases: Sequence[Atlas], filenames: Sequence[str]) -> AtlasManifest:
        """Describe atlases; filenames[i] is the image written for atlases[i]."""
        entries = []
        for atlas, filename in zip(atlases, filenames):
            frames = []
            for node in atlas.nodes:
                texture = node.texture
                frames.append(FrameModel(
                    name=str(texture.source),
                    x=node.rect.x,
                    y=node.rect.y,
                    width=node.rect.width,
                    height=node.rect.height,
                    source_width=texture.source_width,
                    source_height=texture.source_height,
                    trim=TrimModel(
                        left=texture.padding.left,
                        top=texture.padding.top,
                        right=texture.padding.right,
                        bottom=texture.padding.bottom,
                    ),
                ))
            entries.append(AtlasEntry(
                file=Path(filename).name,
                width=atlas.width,
                height=atlas.height,
                frames=frames,
            ))
        return cls(atlases=entries)
