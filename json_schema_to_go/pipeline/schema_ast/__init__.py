"""
Schema AST - decoded JSON Schema fragments.
"""

from __future__ import annotations

from .nodes import JsonValue, SchemaNode
from .parser import SchemaParser

__all__ = [
    "JsonValue",
    "SchemaNode",
    "SchemaParser",
]
