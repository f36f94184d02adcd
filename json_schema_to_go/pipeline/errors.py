"""
Errors raised while resolving schemas and synthesizing types.

Every error is fatal for the current generation run: the pipeline never
recovers or substitutes a default type.
"""

from __future__ import annotations


class StructGenError(Exception):
    """Base class for all generation errors."""


class ResolutionError(StructGenError):
    """Raised when a referenced document cannot be loaded.

    This can happen when:
    - The referenced file cannot be read
    - The file is not valid JSON or does not decode into a schema
    - The referenced document itself carries a $ref (chains are not followed)
    """


class SchemaError(StructGenError):
    """Raised when a node lacks a field its type requires (array without items)."""


class SchemaTypeError(StructGenError):
    """Raised for an unrecognized `type` keyword or shape."""


class OutputValidationError(StructGenError):
    """Raised when generated code fails validation before being written."""
