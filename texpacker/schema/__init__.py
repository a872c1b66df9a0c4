"""Pack configuration and manifest schema."""
from .packjson import (
    PackConfig,
    AtlasManifest,
    AtlasEntry,
    FrameModel,
    TrimModel,
)

__all__ = [
    "PackConfig",
    "AtlasManifest",
    "AtlasEntry",
    "FrameModel",
    "TrimModel",
]
