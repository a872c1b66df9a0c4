"""
Atlas output: image files and the optional JSON manifest.

Atlases are written as <prefix><index:03d>.<ext>, where prefix is the output
path without its extension. "out/sprites.png" gives out/sprites000.png,
out/sprites001.png, ... and the manifest out/sprites.json.
"""

import logging
import os
from typing import List, Optional, Sequence

from texpacker.imaging.compositor import Color, compose_atlas
from texpacker.packing.nodes import Atlas
from texpacker.schema.packjson import AtlasManifest

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = 'png'


def _split_output(output: str):
    prefix, ext = os.path.splitext(output)
    return prefix, (ext.lstrip('.') or DEFAULT_EXTENSION)


def atlas_filename(output: str, index: int) -> str:
    """File name of the index-th atlas for an output path."""
    prefix, ext = _split_output(output)
    return f"{prefix}{index:03d}.{ext}"


def manifest_filename(output: str) -> str:
    prefix, _ = _split_output(output)
    return f"{prefix}.json"


def save_atlases(
    atlases: Sequence[Atlas],
    output: str,
    fill: Optional[Color] = None,
    manifest: bool = False
) -> List[str]:
    """
    Render and write every atlas, creating the output directory if needed.

    Args:
        atlases: Packed atlases, in order
        output: Output path; its extension picks the image format (png if none)
        fill: Color for space not covered by textures (transparent if None)
        manifest: Also write the JSON manifest

    Returns:
        Paths of the files written (images first, then the manifest)
    """
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)

    written = []
    for index, atlas in enumerate(atlases):
        path = atlas_filename(output, index)
        image = compose_atlas(atlas, fill=fill)
        if os.path.splitext(path)[1].lower() in ('.jpg', '.jpeg'):
            image = image.convert('RGB')
        image.save(path)
        written.append(path)
        logger.info(f"Saved {atlas.width}x{atlas.height} atlas to {path}")

    if manifest:
        path = manifest_filename(output)
        doc = AtlasManifest.from_atlases(atlases, written)
        with open(path, 'w') as f:
            f.write(doc.model_dump_json(indent=2))
        written.append(path)
        logger.info(f"Saved manifest to {path}")

    return written
