"""Exception hierarchy for quality-gates."""

from .analysis import AnalysisError, FileAccessError
from .base import QualityGatesError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "QualityGatesError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
]
