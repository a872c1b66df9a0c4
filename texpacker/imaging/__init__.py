"""
Image I/O around the packing core: decoding and trimming sources, compositing
atlases and writing them out.
"""
from .scanner import expand_inputs, load_texture, scan_textures
from .compositor import compose_atlas, crop_box
from .writer import atlas_filename, manifest_filename, save_atlases

__all__ = [
    'expand_inputs',
    'load_texture',
    'scan_textures',
    'compose_atlas',
    'crop_box',
    'atlas_filename',
    'manifest_filename',
    'save_atlases',
]
