"""Utility exports."""

from .config import GeneratorConfig, load_config
from .logging import get_logger

__all__ = [
    "GeneratorConfig",
    "get_logger",
    "load_config",
]
