"""
Single-atlas layout.

Free space is tracked as a FIFO queue of nodes. Each free node is offered to
the best-fit selector exactly once: on a hit the texture is placed at the
node's origin and the leftover L-shaped space is split into new free nodes
queued at the back; on a miss the node is dropped.
"""

import logging
from collections import deque
from typing import Deque, List, Sequence, Tuple

from .nodes import Atlas, Node, Rect, SplitType, TextureInfo
from .selector import Heuristic, select_best_fit
from .splitter import split_node

logger = logging.getLogger(__name__)


def layout_atlas(
    pool: Sequence[TextureInfo],
    width: int,
    height: int,
    padding: int = 0,
    heuristic: Heuristic = Heuristic.AREA
) -> Tuple[Atlas, Tuple[TextureInfo, ...]]:
    """
    Place as many textures from pool as possible into a width x height atlas.

    Args:
        pool: Textures to place, in priority order (not modified)
        width: Atlas width in pixels
        height: Atlas height in pixels
        padding: Gap in pixels kept between neighbouring textures
        heuristic: Best-fit scoring

    Returns:
        Tuple of:
        - the Atlas with its placed nodes in placement order
        - the leftover textures, in their original relative order
    """
    remaining: List[TextureInfo] = list(pool)

    # Nodes live in an arena; the free and placed lists hold arena indices
    arena: List[Node] = [Node(Rect(0, 0, width, height), split=SplitType.HORIZONTAL)]
    free: Deque[int] = deque([0])
    placed: List[int] = []

    while free and remaining:
        index = free.popleft()
        node = arena[index]

        best = select_best_fit(node.rect, remaining, heuristic)
        if best is None:
            continue

        texture = remaining.pop(best)
        for sibling in split_node(node, texture.width, texture.height, padding):
            arena.append(sibling)
            free.append(len(arena) - 1)

        arena[index] = node.occupy(texture)
        placed.append(index)

    atlas = Atlas(width=width, height=height, nodes=tuple(arena[i] for i in placed))
    logger.debug(f"Laid out {len(placed)} textures in {width}x{height}, {len(remaining)} left over")
    return atlas, tuple(remaining)
