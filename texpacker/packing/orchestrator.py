"""
Multi-atlas packing.

Fills atlases at the requested size one after another, carrying the textures
that did not fit into the next atlas, until the pool is empty. Only the last
atlas is shrunk; earlier ones keep the requested size.
"""

import logging
from typing import List, Sequence, Tuple

from ..exceptions import OversizedTextureError, PackingError
from .layout import layout_atlas
from .nodes import Atlas, TextureInfo
from .selector import Heuristic
from .sizing import shrink_atlas

logger = logging.getLogger(__name__)


def filter_oversized(
    textures: Sequence[TextureInfo],
    max_size: int
) -> Tuple[Tuple[TextureInfo, ...], List[OversizedTextureError]]:
    """
    Split textures into those that fit an empty atlas and those that never will.

    The check uses the untrimmed source size.

    Returns:
        Tuple of (accepted textures in input order, rejection errors)
    """
    accepted = []
    rejected = []
    for texture in textures:
        if texture.source_width > max_size or texture.source_height > max_size:
            error = OversizedTextureError(
                texture.source, texture.source_width, texture.source_height, max_size
            )
            logger.warning(str(error))
            rejected.append(error)
            continue
        accepted.append(texture)
    return tuple(accepted), rejected


def build_atlases(
    pool: Sequence[TextureInfo],
    atlas_size: int,
    padding: int = 0,
    heuristic: Heuristic = Heuristic.AREA
) -> List[Atlas]:
    """
    Pack every texture of pool into as many atlas_size atlases as needed.

    Every texture must already fit an empty atlas (see filter_oversized).

    Raises:
        PackingError: If an atlas ends up empty while textures remain
    """
    atlases: List[Atlas] = []
    remaining = tuple(pool)

    while remaining:
        atlas, leftovers = layout_atlas(remaining, atlas_size, atlas_size, padding, heuristic)

        if not atlas.nodes:
            raise PackingError(
                f"None of the {len(remaining)} remaining textures fit a "
                f"{atlas_size}x{atlas_size} atlas"
            )

        if not leftovers:
            atlas = shrink_atlas(remaining, atlas, padding, heuristic)

        logger.info(
            f"Atlas {len(atlases)}: {len(atlas.nodes)} textures in {atlas.width}x{atlas.height}"
        )
        atlases.append(atlas)
        remaining = leftovers

    return atlases


def pack_textures(
    textures: Sequence[TextureInfo],
    atlas_size: int,
    padding: int = 0,
    heuristic: Heuristic = Heuristic.AREA
) -> Tuple[List[Atlas], List[OversizedTextureError]]:
    """
    Drop oversized textures, then pack the rest.

    Returns:
        Tuple of (atlases in order, rejected textures)
    """
    accepted, rejected = filter_oversized(textures, atlas_size)
    return build_atlases(accepted, atlas_size, padding, heuristic), rejected
