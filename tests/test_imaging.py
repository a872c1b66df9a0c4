"""
Tests for scanning, compositing and writing atlases
"""
import json
import os
import tempfile

import pytest
from PIL import Image

from texpacker.imaging import (
    atlas_filename,
    compose_atlas,
    crop_box,
    expand_inputs,
    load_texture,
    manifest_filename,
    save_atlases,
    scan_textures,
)
from texpacker.packing import Atlas, Node, Padding, Rect, TextureInfo, build_atlases


def write_sprite(path, size, box=None, color=(255, 0, 0, 255)):
    """Transparent image with an opaque box (left, top, right, bottom)."""
    image = Image.new('RGBA', size, (0, 0, 0, 0))
    box = box or (0, 0, size[0], size[1])
    image.paste(Image.new('RGBA', (box[2] - box[0], box[3] - box[1]), color), box[:2])
    image.save(path)
    return path


class TestScanner:
    """Loading source images"""

    def test_load_trims_border(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_sprite(os.path.join(tmpdir, "hero.png"), (16, 12), box=(2, 3, 10, 11))
            texture = load_texture(path)

            assert texture.source == path
            assert (texture.width, texture.height) == (8, 8)
            assert texture.padding == Padding(left=2, top=3, right=6, bottom=1)

    def test_rgb_image_is_not_trimmed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "opaque.bmp")
            Image.new('RGB', (9, 7), (10, 20, 30)).save(path)
            texture = load_texture(path)
            assert (texture.width, texture.height) == (9, 7)

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_texture("/nonexistent/sprite.png")

    def test_scan_keeps_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = [
                write_sprite(os.path.join(tmpdir, name), (4, 4))
                for name in ("b.png", "a.png", "c.png")
            ]
            assert [t.source for t in scan_textures(paths)] == paths

    def test_expand_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            sub = os.path.join(tmpdir, "sprites")
            os.makedirs(sub)
            write_sprite(os.path.join(sub, "b.png"), (4, 4))
            write_sprite(os.path.join(sub, "a.png"), (4, 4))
            with open(os.path.join(sub, "notes.txt"), 'w') as f:
                f.write("not an image")
            extra = write_sprite(os.path.join(tmpdir, "z.png"), (4, 4))

            paths = expand_inputs([extra, sub])
            assert paths == [
                extra,
                os.path.join(sub, "a.png"),
                os.path.join(sub, "b.png"),
            ]


class TestCompositor:
    """Rendering atlases"""

    def test_crop_box(self):
        texture = TextureInfo("x", 5, 4, Padding(left=2, top=1, right=3, bottom=0))
        assert crop_box(texture) == (2, 1, 7, 5)

    def test_pastes_trimmed_texture_at_node(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_sprite(os.path.join(tmpdir, "s.png"), (10, 10), box=(3, 3, 7, 7),
                                color=(0, 255, 0, 255))
            texture = load_texture(path)
            atlas = Atlas(16, 16, (Node(Rect(5, 6, 4, 4), texture),))

            image = compose_atlas(atlas)
            assert image.size == (16, 16)
            assert image.mode == 'RGBA'
            assert image.getpixel((5, 6)) == (0, 255, 0, 255)
            assert image.getpixel((8, 9)) == (0, 255, 0, 255)
            assert image.getpixel((9, 9)) == (0, 0, 0, 0)
            assert image.getpixel((0, 0)) == (0, 0, 0, 0)

    def test_fill_color(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_sprite(os.path.join(tmpdir, "s.png"), (2, 2), color=(0, 0, 255, 255))
            atlas = Atlas(4, 4, (Node(Rect(0, 0, 2, 2), load_texture(path)),))

            image = compose_atlas(atlas, fill="darkmagenta")
            assert image.getpixel((0, 0)) == (0, 0, 255, 255)
            assert image.getpixel((3, 3)) == (139, 0, 139, 255)

            image = compose_atlas(atlas, fill=(1, 2, 3))
            assert image.getpixel((3, 3)) == (1, 2, 3, 255)


class TestWriter:
    """Output file naming and saving"""

    @pytest.mark.parametrize("output,index,expected", [
        ("out/atlas.png", 0, "out/atlas000.png"),
        ("out/atlas.png", 12, "out/atlas012.png"),
        ("atlas.tga", 3, "atlas003.tga"),
        ("out/atlas", 1, "out/atlas001.png"),
    ])
    def test_atlas_filename(self, output, index, expected):
        assert atlas_filename(output, index) == expected

    def test_manifest_filename(self):
        assert manifest_filename("out/atlas.png") == "out/atlas.json"

    def test_save_creates_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = [
                write_sprite(os.path.join(tmpdir, f"s{i}.png"), (100, 100))
                for i in range(2)
            ]
            atlases = build_atlases([load_texture(p) for p in paths], 128)
            output = os.path.join(tmpdir, "nested", "dir", "atlas.png")

            written = save_atlases(atlases, output, manifest=True)

            assert written == [
                os.path.join(tmpdir, "nested", "dir", "atlas000.png"),
                os.path.join(tmpdir, "nested", "dir", "atlas001.png"),
                os.path.join(tmpdir, "nested", "dir", "atlas.json"),
            ]
            for path, atlas in zip(written, atlases):
                with Image.open(path) as image:
                    assert image.size == (atlas.width, atlas.height)

            with open(written[-1]) as f:
                manifest = json.load(f)
            assert [a["file"] for a in manifest["atlases"]] == ["atlas000.png", "atlas001.png"]
            assert manifest["atlases"][0]["frames"][0]["name"] == paths[0]

    def test_save_jpeg_drops_alpha(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_sprite(os.path.join(tmpdir, "s.png"), (8, 8))
            atlases = build_atlases([load_texture(path)], 8)
            written = save_atlases(atlases, os.path.join(tmpdir, "atlas.jpg"))
            with Image.open(written[0]) as image:
                assert image.mode == 'RGB'
