"""
Value types shared by the packing stages.

Everything here is immutable. A free Node becomes a placed Node by building a
new value (see Node.occupy) rather than by mutating its bounds, so a layout
trial can be thrown away without affecting anything else.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in atlas pixels."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def fits(self, width: int, height: int) -> bool:
        """True if a width x height block fits inside without rotation."""
        return width <= self.width and height <= self.height

    def intersects(self, other: "Rect") -> bool:
        return not (
            self.right <= other.x or
            self.bottom <= other.y or
            self.x >= other.right or
            self.y >= other.bottom
        )


@dataclass(frozen=True)
class Padding:
    """Transparent border stripped from each side of a source image."""
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def __post_init__(self):
        if min(self.left, self.top, self.right, self.bottom) < 0:
            raise ValueError(f"Padding must be non-negative, got {self}")


@dataclass(frozen=True)
class TextureInfo:
    """
    A source texture after alpha trimming.

    Attributes:
        source: Opaque identifier of the source image (usually its path)
        width: Trimmed width in pixels
        height: Trimmed height in pixels
        padding: Border that was trimmed away
    """
    source: Any
    width: int
    height: int
    padding: Padding = field(default_factory=Padding)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Texture {self.source} must be at least 1x1, got {self.width}x{self.height}"
            )

    @property
    def source_width(self) -> int:
        """Width of the untrimmed source image"""
        return self.width + self.padding.left + self.padding.right

    @property
    def source_height(self) -> int:
        """Height of the untrimmed source image"""
        return self.height + self.padding.top + self.padding.bottom

    @property
    def area(self) -> int:
        return self.width * self.height


class SplitType(str, Enum):
    """How the free space left in a node is carved once a texture lands in it."""
    HORIZONTAL = "horizontal"  # remaining textures stacked below
    VERTICAL = "vertical"  # remaining textures side by side


@dataclass(frozen=True)
class Node:
    """A region of an atlas, either free (texture is None) or holding one texture."""
    rect: Rect
    texture: Optional[TextureInfo] = None
    split: SplitType = SplitType.HORIZONTAL

    @property
    def is_free(self) -> bool:
        return self.texture is None

    def occupy(self, texture: TextureInfo) -> "Node":
        """Return the placed node for texture, shrunk to the texture's size."""
        rect = Rect(self.rect.x, self.rect.y, texture.width, texture.height)
        return replace(self, rect=rect, texture=texture)


@dataclass(frozen=True)
class Atlas:
    """One packed atlas: its final size and the placed nodes in placement order."""
    width: int
    height: int
    nodes: Tuple[Node, ...] = ()

    @property
    def textures(self) -> Tuple[TextureInfo, ...]:
        return tuple(node.texture for node in self.nodes)
