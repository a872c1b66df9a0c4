"""
Core texpacker client API

Provides the main Packer class for packing textures and the PackResult class
for rendering and saving the atlases.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from PIL import Image

from texpacker.exceptions import OversizedTextureError
from texpacker.imaging import compose_atlas, expand_inputs, scan_textures
from texpacker.imaging.compositor import Color
from texpacker.imaging.writer import atlas_filename, save_atlases
from texpacker.packing import Atlas, Heuristic, TextureInfo, pack_textures
from texpacker.schema import AtlasManifest, PackConfig


@dataclass
class PackResult:
    """
    Outcome of a packing run.

    Attributes:
        atlases: Packed atlases in order (only the last one may be smaller
                 than the configured size)
        rejected: Textures skipped because they are larger than an atlas
        config: Options the run used
    """
    atlases: List[Atlas]
    rejected: List[OversizedTextureError] = field(default_factory=list)
    config: PackConfig = field(default_factory=PackConfig)

    @property
    def placed_count(self) -> int:
        """Number of textures placed across all atlases"""
        return sum(len(atlas.nodes) for atlas in self.atlases)

    def atlas_filenames(self, output: str) -> List[str]:
        """
        File names save() writes the atlases to.

        Example:
            >>> result.atlas_filenames("out/sprites.png")
            ['out/sprites000.png', 'out/sprites001.png']
        """
        return [atlas_filename(output, i) for i in range(len(self.atlases))]

    def render(self, index: int, fill: Optional[Color] = None) -> Image.Image:
        """Composite one atlas into an RGBA image."""
        return compose_atlas(self.atlases[index], fill=fill)

    def manifest(self, output: str) -> AtlasManifest:
        """Describe every placement, with file names as save(output) writes them."""
        return AtlasManifest.from_atlases(self.atlases, self.atlas_filenames(output))

    def save(self, output: str, fill: Optional[Color] = None, manifest: bool = False) -> List[str]:
        """
        Write every atlas image (and optionally the JSON manifest).

        Args:
            output: Output path such as "out/sprites.png"; atlases are written
                    as out/sprites000.png, out/sprites001.png, ...
            fill: Color for space not covered by textures (transparent if None)
            manifest: Also write out/sprites.json

        Returns:
            Paths of the written files

        Examples:
            >>> result.save("out/sprites.png")
            >>> result.save("out/sprites.png", fill="darkmagenta", manifest=True)
        """
        return save_atlases(self.atlases, output, fill=fill, manifest=manifest)


class Packer:
    """
    Packs textures into as few square atlases as possible.

    Examples:
        Basic usage:
        >>> packer = Packer(atlas_size=512, padding=2)
        >>> packer.pack_files(["hero.png", "tiles/"]).save("out/sprites.png")

        Packing pre-measured textures:
        >>> result = packer.pack([TextureInfo("a", 64, 64), TextureInfo("b", 32, 32)])
        >>> print(len(result.atlases), result.placed_count)
    """

    def __init__(
        self,
        atlas_size: int = 1024,
        padding: int = 0,
        heuristic: Union[Heuristic, str] = Heuristic.AREA
    ):
        """
        Initialize the packer.

        Args:
            atlas_size: Side of each atlas in pixels; larger textures are rejected
            padding: Gap in pixels kept between neighbouring textures
            heuristic: Best-fit scoring, 'area' or 'max_one_axis'

        Raises:
            pydantic.ValidationError: If an option is invalid
        """
        self.config = PackConfig(atlas_size=atlas_size, padding=padding, heuristic=heuristic)

    def scan(self, paths: Iterable[Union[str, os.PathLike]]) -> List[TextureInfo]:
        """Decode and trim source images; directories are expanded to their images."""
        return scan_textures(expand_inputs(paths))

    def pack(self, textures: Sequence[TextureInfo]) -> PackResult:
        """
        Pack already measured textures.

        Textures larger than the atlas are reported in PackResult.rejected and
        the rest are packed in the given order.
        """
        atlases, rejected = pack_textures(
            textures,
            self.config.atlas_size,
            self.config.padding,
            self.config.heuristic,
        )
        return PackResult(atlases=atlases, rejected=rejected, config=self.config)

    def pack_files(self, paths: Iterable[Union[str, os.PathLike]]) -> PackResult:
        """Scan image files (or directories of them) and pack them."""
        return self.pack(self.scan(paths))
