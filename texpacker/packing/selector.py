"""
Best-fit selection of the next texture for a free node.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Union

from ..exceptions import InvalidHeuristicError
from .nodes import Rect, TextureInfo


class Heuristic(str, Enum):
    """Scoring used to pick the texture that best fills a free node."""
    AREA = "area"  # maximize covered area
    MAX_ONE_AXIS = "max_one_axis"  # maximize the tighter of the two axes

    @classmethod
    def parse(cls, value: Union["Heuristic", str]) -> "Heuristic":
        """
        Resolve a heuristic from a member, its value or its name.

        Matching ignores case, '-' and '_', so "area", "AREA", "MaxOneAxis"
        and "max-one-axis" are all accepted.

        Raises:
            InvalidHeuristicError: If value names no known heuristic
        """
        if isinstance(value, cls):
            return value
        key = _normalize(str(value))
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        choices = ", ".join(m.value for m in cls)
        raise InvalidHeuristicError(f"Unknown heuristic: {value!r}. Supported: {choices}")


def _normalize(name: str) -> str:
    return name.replace('-', '').replace('_', '').lower()


def _area_score(texture: TextureInfo, rect: Rect) -> float:
    return texture.area / rect.area


def _max_one_axis_score(texture: TextureInfo, rect: Rect) -> float:
    return max(texture.width / rect.width, texture.height / rect.height)


_SCORERS: Dict[Heuristic, Callable[[TextureInfo, Rect], float]] = {
    Heuristic.AREA: _area_score,
    Heuristic.MAX_ONE_AXIS: _max_one_axis_score,
}


def score(heuristic: Heuristic, texture: TextureInfo, rect: Rect) -> float:
    """How well texture fills rect under heuristic (higher is better, 1.0 is a perfect fit)."""
    return _SCORERS[heuristic](texture, rect)


def select_best_fit(
    rect: Rect,
    pool: Sequence[TextureInfo],
    heuristic: Heuristic = Heuristic.AREA
) -> Optional[int]:
    """
    Pick the texture in pool that best fills rect.

    Textures that do not fit are skipped. On equal scores the earliest
    texture in pool order wins.

    Returns:
        Index into pool of the winner, or None if nothing fits
    """
    scorer = _SCORERS[heuristic]
    best_index = None
    best_score = 0.0

    for index, texture in enumerate(pool):
        if not rect.fits(texture.width, texture.height):
            continue
        candidate = scorer(texture, rect)
        if candidate > best_score:
            best_score = candidate
            best_index = index

    return best_index
