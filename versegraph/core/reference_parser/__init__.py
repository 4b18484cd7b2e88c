"""
Bible reference parsing and validation.
"""

from versegraph.core.reference_parser.parser import ReferenceParser, ValidationResult

__all__ = [
    "ReferenceParser",
    "ValidationResult",
]
