"""
Atlas compositing.

Builds the RGBA image for a packed atlas by cropping every source to its
trimmed rectangle and pasting it at its node's origin.
"""

from typing import Optional, Tuple, Union

from PIL import Image, ImageColor

from texpacker.packing.nodes import Atlas, TextureInfo

Color = Union[str, Tuple[int, int, int], Tuple[int, int, int, int]]

TRANSPARENT = (0, 0, 0, 0)


def crop_box(texture: TextureInfo) -> Tuple[int, int, int, int]:
    """(left, upper, right, lower) of the visible part of the source image."""
    pad = texture.padding
    return (pad.left, pad.top, pad.left + texture.width, pad.top + texture.height)


def compose_atlas(atlas: Atlas, fill: Optional[Color] = None) -> Image.Image:
    """
    Render an atlas.

    Args:
        atlas: Packed atlas whose node textures have image paths as source
        fill: Color for every pixel not covered by a texture (padding gaps and
              unused space). Any Pillow color spec; transparent if None.

    Returns:
        RGBA image of atlas.width x atlas.height
    """
    background = TRANSPARENT if fill is None else _rgba(fill)
    canvas = Image.new('RGBA', (atlas.width, atlas.height), background)

    for node in atlas.nodes:
        texture = node.texture
        with Image.open(texture.source) as source:
            cropped = source.convert('RGBA').crop(crop_box(texture))
        canvas.paste(cropped, (node.rect.x, node.rect.y))

    return canvas


def _rgba(color: Color) -> Tuple[int, int, int, int]:
    if isinstance(color, str):
        return ImageColor.getcolor(color, 'RGBA')
    if len(color) == 3:
        return (*color, 255)
    return tuple(color)
