"""
texpacker - Pack sprites into texture atlases

Trims transparent borders, packs the textures into as few square atlases as
possible (shrinking the last one) and writes them out as images.
"""

from texpacker.client import Packer, PackResult
from texpacker.packing import Atlas, Heuristic, TextureInfo

__version__ = "0.1.0"
__all__ = ["Packer", "PackResult", "Atlas", "Heuristic", "TextureInfo"]
