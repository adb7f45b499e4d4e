"""Application services for the learning module."""

from .bundle_processor import BundleProcessor
from .bundle_validator import BundleValidator
from .timestamps import format_timestamp, parse_timestamp

__all__ = [
    "BundleProcessor",
    "BundleValidator",
    "format_timestamp",
    "parse_timestamp",
]
