"""Custom exceptions for texture packing"""


class PackerError(Exception):
    """Base exception for packing errors"""
    pass


class OversizedTextureError(PackerError):
    """Texture is larger than the atlas in at least one axis (texture is skipped)"""

    def __init__(self, source, width: int, height: int, max_size: int):
        self.source = source
        self.width = width
        self.height = height
        self.max_size = max_size
        super().__init__(
            f"{source} is too large to fit in the atlas "
            f"({width}x{height} > {max_size}x{max_size}). Skipping!"
        )


class InvalidHeuristicError(PackerError, ValueError):
    """Unknown best-fit heuristic"""
    pass


class AtlasSizeError(PackerError):
    """Atlas cannot be resized to hold its textures"""
    pass


class PackingError(PackerError):
    """Packing made no progress on a non-empty pool"""
    pass
