"""Centralized configuration for swiftship.

Example:
    >>> from swiftship.config import EnvVar, GeneratorSettings, get_environment
    >>>
    >>> workers = get_environment(EnvVar.SWIFTSHIP_WORKERS)  # Returns int: 1
    >>> settings = GeneratorSettings.from_environment(workers=4)

Environment Variable Categories:
    limits: Tree depth and node-count ceilings
    generation: Depth warning threshold and worker count
    output: CLI log level and output directory
"""

from .lib import (
    EnvConfig,
    EnvVar,
    GeneratorSettings,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

__all__ = [
    "EnvConfig",
    "EnvVar",
    "GeneratorSettings",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
]
