"""Shared infrastructure: logging and the error taxonomy."""

from .errors import CodegenError
from .log import get_logger, setup_logging

__all__ = ["CodegenError", "get_logger", "setup_logging"]
