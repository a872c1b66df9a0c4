"""
Packing core: alpha trimming, free-space layout, size search and the
multi-atlas loop.
"""
from .nodes import Atlas, Node, Padding, Rect, SplitType, TextureInfo
from .trim import alpha_mask, compute_alpha_padding, trim_texture
from .splitter import split_node
from .selector import Heuristic, score, select_best_fit
from .layout import layout_atlas
from .sizing import MIN_ATLAS_SIZE, shrink_atlas
from .orchestrator import build_atlases, filter_oversized, pack_textures

__all__ = [
    'Atlas',
    'Node',
    'Padding',
    'Rect',
    'SplitType',
    'TextureInfo',
    'alpha_mask',
    'compute_alpha_padding',
    'trim_texture',
    'split_node',
    'Heuristic',
    'score',
    'select_best_fit',
    'layout_atlas',
    'MIN_ATLAS_SIZE',
    'shrink_atlas',
    'build_atlases',
    'filter_oversized',
    'pack_textures',
]
