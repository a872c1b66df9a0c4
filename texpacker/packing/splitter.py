"""Free-space splitting after a texture is placed in a node."""

from typing import List

from .nodes import Node, Rect, SplitType


def _horizontal_split(rect: Rect, width: int, height: int, padding: int) -> List[Node]:
    # Rest of the row to the right, full-width band below
    return [
        Node(Rect(rect.x + width + padding, rect.y, rect.width - width - padding, height),
             split=SplitType.VERTICAL),
        Node(Rect(rect.x, rect.y + height + padding, rect.width, rect.height - height - padding),
             split=SplitType.HORIZONTAL),
    ]


def _vertical_split(rect: Rect, width: int, height: int, padding: int) -> List[Node]:
    # Full-height column to the right, texture-wide band below
    return [
        Node(Rect(rect.x + width + padding, rect.y, rect.width - width - padding, rect.height),
             split=SplitType.VERTICAL),
        Node(Rect(rect.x, rect.y + height + padding, width, rect.height - height - padding),
             split=SplitType.HORIZONTAL),
    ]


def split_node(node: Node, width: int, height: int, padding: int = 0) -> List[Node]:
    """
    Carve the space left around a width x height texture placed at the
    node's origin into at most two free nodes.

    Args:
        node: The free node being consumed
        width: Width of the texture placed in it
        height: Height of the texture placed in it
        padding: Gap reserved between the texture and its siblings

    Returns:
        Right sibling first, then bottom sibling. Siblings without area are
        dropped, so the list holds 0, 1 or 2 nodes.
    """
    if node.split is SplitType.HORIZONTAL:
        siblings = _horizontal_split(node.rect, width, height, padding)
    else:
        siblings = _vertical_split(node.rect, width, height, padding)
    return [n for n in siblings if n.rect.width > 0 and n.rect.height > 0]
