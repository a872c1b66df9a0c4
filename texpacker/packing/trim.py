"""
Alpha trimming.

Finds the fully transparent border around a texture so only the visible part
is packed. The stripped border is kept in TextureInfo.padding so the original
placement can be reconstructed by whoever consumes the atlas.
"""

import logging
from typing import Any

import numpy as np
from PIL import Image

from .nodes import Padding, TextureInfo

logger = logging.getLogger(__name__)


def alpha_mask(image: Image.Image) -> np.ndarray:
    """
    Opacity mask of an image, indexed [y, x].

    Images without an alpha channel or a transparency key are fully opaque.
    """
    if 'A' not in image.getbands():
        if 'transparency' not in image.info:
            return np.ones((image.height, image.width), dtype=bool)
        image = image.convert('RGBA')
    return np.asarray(image.getchannel('A')) != 0


def _count_clear(opaque: np.ndarray) -> int:
    """Number of leading False entries."""
    hits = np.flatnonzero(opaque)
    return int(hits[0]) if hits.size else len(opaque)


def compute_alpha_padding(mask: Any) -> Padding:
    """
    Count the transparent rows/columns on each side of an opacity mask.

    Args:
        mask: 2-D boolean array-like indexed [y, x], True where a pixel is
              not fully transparent

    Returns:
        Padding with the number of clear rows (top/bottom) and columns
        (left/right). A fully transparent mask splits down the middle.

    Raises:
        ValueError: If the mask is not 2-D or is empty
    """
    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2 or mask.size == 0:
        raise ValueError(f"Expected a non-empty 2-D mask, got shape {mask.shape}")

    height, width = mask.shape
    opaque_rows = mask.any(axis=1)
    opaque_cols = mask.any(axis=0)

    bottom = _count_clear(opaque_rows[::-1])
    top = _count_clear(opaque_rows)
    right = _count_clear(opaque_cols[::-1])
    left = _count_clear(opaque_cols)

    if left + right > width:
        # Nothing visible: both scans ran across the whole image
        left = width // 2
        right = width - left
        top = height // 2
        bottom = height - top

    return Padding(left=left, top=top, right=right, bottom=bottom)


def trim_texture(source: Any, mask: Any) -> TextureInfo:
    """
    Build the TextureInfo for a source from its opacity mask.

    Every texture keeps at least a 1x1 area: when trimming would leave a zero
    dimension, the right/bottom padding gives one pixel back.
    """
    mask = np.asarray(mask, dtype=bool)
    padding = compute_alpha_padding(mask)
    height, width = mask.shape

    trimmed_w = width - padding.left - padding.right
    trimmed_h = height - padding.top - padding.bottom
    right, bottom = padding.right, padding.bottom

    if trimmed_h == 0:
        trimmed_h += 1
        bottom -= 1
    if trimmed_w == 0:
        trimmed_w += 1
        right -= 1

    if (right, bottom) != (padding.right, padding.bottom):
        logger.debug(f"{source} is fully transparent, keeping a 1x1 texel")
        padding = Padding(left=padding.left, top=padding.top, right=right, bottom=bottom)

    return TextureInfo(source=source, width=trimmed_w, height=trimmed_h, padding=padding)
