"""Error taxonomy for the code generation engine.

Errors fall into four families:
    schema: the input tree violates the catalog (fix the tree and retry)
    reference: dangling screen ids or unresolvable bindings (aggregated)
    invariant: catalog and builder/printer out of sync (internal, fatal)
    resource: tree exceeds configured size ceilings
"""

from .lib import (
    CodegenError,
    CrossReferenceError,
    DuplicateId,
    DuplicateType,
    InvalidProps,
    InvalidStructure,
    InvariantError,
    ReferenceIssue,
    ResourceLimitExceeded,
    SchemaError,
    TokenResolutionFailure,
    UnknownModifier,
    UnknownType,
    UnrenderableExpression,
    UnresolvedBindingSource,
)

__all__ = [
    "CodegenError",
    # Schema
    "SchemaError",
    "UnknownType",
    "InvalidProps",
    "DuplicateType",
    "DuplicateId",
    "InvalidStructure",
    # Reference
    "ReferenceIssue",
    "CrossReferenceError",
    "UnresolvedBindingSource",
    # Invariant
    "InvariantError",
    "UnknownModifier",
    "TokenResolutionFailure",
    "UnrenderableExpression",
    # Resource
    "ResourceLimitExceeded",
]
