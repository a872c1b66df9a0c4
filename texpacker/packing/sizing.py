"""
Size search for the trailing atlas.

The last atlas of a run usually has room to spare. Halving both sides until
the textures no longer fit, then stepping back one level, gives the smallest
halving of the requested size that still holds everything.
"""

import logging
from typing import Sequence

from ..exceptions import AtlasSizeError
from .layout import layout_atlas
from .nodes import Atlas, TextureInfo
from .selector import Heuristic

logger = logging.getLogger(__name__)

# Smallest side an atlas is shrunk to
MIN_ATLAS_SIZE = 1


def shrink_atlas(
    pool: Sequence[TextureInfo],
    atlas: Atlas,
    padding: int = 0,
    heuristic: Heuristic = Heuristic.AREA,
    min_size: int = MIN_ATLAS_SIZE
) -> Atlas:
    """
    Shrink an atlas that already holds the whole pool.

    Args:
        pool: The textures laid out in atlas
        atlas: Layout of pool at the requested size, with nothing left over
        padding: Gap in pixels kept between neighbouring textures
        heuristic: Best-fit scoring
        min_size: Neither side is shrunk below this

    Returns:
        The layout at the smallest size tried that still holds every texture

    Raises:
        AtlasSizeError: If atlas does not hold every texture of pool
    """
    if len(atlas.nodes) != len(pool):
        raise AtlasSizeError(
            f"Cannot shrink a {atlas.width}x{atlas.height} atlas holding "
            f"{len(atlas.nodes)} of {len(pool)} textures"
        )

    best = atlas
    while True:
        width, height = best.width // 2, best.height // 2
        if width < min_size or height < min_size:
            logger.debug(f"Reached minimum atlas size at {best.width}x{best.height}")
            break

        trial, leftovers = layout_atlas(pool, width, height, padding, heuristic)
        if leftovers:
            logger.debug(f"{width}x{height} overflows by {len(leftovers)} textures")
            break
        best = trial

    if (best.width, best.height) != (atlas.width, atlas.height):
        logger.info(f"Shrunk final atlas from {atlas.width}x{atlas.height} to {best.width}x{best.height}")
    return best
