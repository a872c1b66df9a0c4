"""
Source image scanning.

Decodes each source image with Pillow and turns it into a TextureInfo with
its transparent border trimmed.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from PIL import Image

from texpacker.packing.nodes import TextureInfo
from texpacker.packing.trim import alpha_mask, trim_texture

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ('.png', '.tga', '.bmp', '.gif', '.jpg', '.jpeg', '.webp', '.tif', '.tiff')

PathLike = Union[str, os.PathLike]


def expand_inputs(inputs: Iterable[PathLike]) -> List[str]:
    """
    Expand directories into the image files they contain.

    Files are kept in the given order; a directory contributes its image
    files (by extension) sorted by name.
    """
    paths = []
    for item in inputs:
        path = Path(item)
        if path.is_dir():
            paths.extend(
                str(p) for p in sorted(path.iterdir())
                if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
            )
        else:
            paths.append(str(path))
    return paths


def load_texture(path: PathLike) -> TextureInfo:
    """
    Decode one image and measure its transparent border.

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Texture not found: {path}")

    with Image.open(path) as image:
        mask = alpha_mask(image)
    return trim_texture(str(path), mask)


def scan_textures(paths: Iterable[PathLike]) -> List[TextureInfo]:
    """Load every path in order."""
    textures = []
    for path in paths:
        texture = load_texture(path)
        textures.append(texture)
        logger.info(f"Added {path}")
    return textures
