"""Centralized environment configuration for swiftship.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from swiftship.config import EnvVar, get_environment
    >>>
    >>> depth = get_environment(EnvVar.SWIFTSHIP_MAX_TREE_DEPTH)  # Returns int
    >>> depth = get_environment(EnvVar.SWIFTSHIP_MAX_TREE_DEPTH, override=16)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "SWIFTSHIP_WORKERS").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables read by swiftship.

    Categories:
        - limits: Resource ceilings applied before traversal
        - generation: Orchestrator behaviour
        - output: CLI output settings
    """

    # -------------------------------------------------------------------------
    # Resource limits
    # -------------------------------------------------------------------------
    SWIFTSHIP_MAX_TREE_DEPTH = EnvConfig(
        name="SWIFTSHIP_MAX_TREE_DEPTH",
        default=32,
        var_type=int,
        description="Maximum component tree depth per screen",
        category="limits",
    )
    SWIFTSHIP_MAX_NODE_COUNT = EnvConfig(
        name="SWIFTSHIP_MAX_NODE_COUNT",
        default=2000,
        var_type=int,
        description="Maximum number of nodes per screen",
        category="limits",
    )

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------
    SWIFTSHIP_DEPTH_WARNING = EnvConfig(
        name="SWIFTSHIP_DEPTH_WARNING",
        default=8,
        var_type=int,
        description="Nesting depth above which a readability warning is emitted",
        category="generation",
    )
    SWIFTSHIP_WORKERS = EnvConfig(
        name="SWIFTSHIP_WORKERS",
        default=1,
        var_type=int,
        description="Threads used to build screens (1 = sequential)",
        category="generation",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    SWIFTSHIP_LOG_LEVEL = EnvConfig(
        name="SWIFTSHIP_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="output",
    )
    SWIFTSHIP_OUTPUT_DIR = EnvConfig(
        name="SWIFTSHIP_OUTPUT_DIR",
        default=Path("generated"),
        var_type=Path,
        description="Directory the CLI writes generated sources to",
        category="output",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert a raw environment string to ``var_type``, or ``default``."""
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is Path:
        return Path(value)

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type.
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category."""
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Generator Settings
# =============================================================================


@dataclass(frozen=True)
class GeneratorSettings:
    """Resolved settings for one generation request.

    Attributes:
        max_tree_depth: Depth ceiling checked before a tree is traversed.
        max_node_count: Node-count ceiling checked before traversal.
        depth_warning: Nesting depth that triggers a readability warning.
        workers: Thread count for building screens; 1 means sequential.
    """

    max_tree_depth: int = 32
    max_node_count: int = 2000
    depth_warning: int = 8
    workers: int = 1

    def __post_init__(self):
        if self.max_tree_depth < 1 or self.max_node_count < 1:
            raise ValueError("Tree limits must be positive")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_environment(
        cls,
        max_tree_depth: int | None = None,
        max_node_count: int | None = None,
        depth_warning: int | None = None,
        workers: int | None = None,
    ) -> GeneratorSettings:
        """Resolve every field as override > environment > default."""
        return cls(
            max_tree_depth=get_environment(
                EnvVar.SWIFTSHIP_MAX_TREE_DEPTH, override=max_tree_depth
            ),
            max_node_count=get_environment(
                EnvVar.SWIFTSHIP_MAX_NODE_COUNT, override=max_node_count
            ),
            depth_warning=get_environment(
                EnvVar.SWIFTSHIP_DEPTH_WARNING, override=depth_warning
            ),
            workers=get_environment(EnvVar.SWIFTSHIP_WORKERS, override=workers),
        )


__all__ = [
    "EnvConfig",
    "EnvVar",
    "GeneratorSettings",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
]
