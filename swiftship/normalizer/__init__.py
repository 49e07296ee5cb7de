"""Tree normalization: catalog validation, defaults and screen references."""

from swiftship.normalizer.lib import (
    ROOT_PATH,
    NormalizedNode,
    NormalizedTree,
    ReferenceKind,
    ScreenReference,
    TreeLimits,
    measure,
    normalize,
)

__all__ = [
    "ROOT_PATH",
    "TreeLimits",
    "ReferenceKind",
    "ScreenReference",
    "NormalizedNode",
    "NormalizedTree",
    "measure",
    "normalize",
]
