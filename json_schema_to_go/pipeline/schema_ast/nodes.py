"""
Schema node definition.

A SchemaNode is one fragment of a JSON Schema document. It is decoded from
raw JSON, mutated in place during resolution ($ref substitution, extends
merge, additionalProperties normalization) and discarded once its type has
been synthesized.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias

# Raw JSON value as produced by json.load
JsonValue: TypeAlias = dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None


@dataclass
class SchemaNode:
    """One schema fragment."""

    # Path to another schema document, consumed once by the resolver
    ref: str = ""

    # Declared "$schema" URI (informational)
    schema: str = ""

    title: str = ""

    # None, a type keyword, a list of alternative keywords, or an invalid shape
    type: Any = None

    # Informational only
    description: str = ""

    extends: SchemaNode | None = None

    # Normalized to an empty dict by the resolver
    properties: dict[str, SchemaNode] | None = None

    # Raw "additionalProperties" value, normalized into additional_properties
    additional_properties_raw: JsonValue = None
    additional_properties: SchemaNode | None = None

    items: SchemaNode | None = None

    # Location in the source documents (for error messages)
    source_path: str = ""

    # Directory of the document this node was decoded from
    base_dir: Path | None = field(default=None, repr=False)

    # Set once the resolver has processed the node
    resolved: bool = field(default=False, repr=False, compare=False)

    def describe(self) -> str:
        """Short human readable identification used in error messages."""
        parts = [self.source_path or "<schema>"]
        if self.title:
            parts.append(f"title={self.title!r}")
        if self.type is not None:
            parts.append(f"type={self.type!r}")
        return " ".join(parts)
