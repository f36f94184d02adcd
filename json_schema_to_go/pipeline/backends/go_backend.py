"""
Go backend: renders type expressions as Go struct declarations.
"""

from __future__ import annotations

import json

from ..analyzer.ir_nodes import FieldDef, StructDef, TypeKind, TypeRef
from .base import CodeBackend

INDENT = "\t"


class GoBackend(CodeBackend):
    """Renders named composite types as Go `type` declarations."""

    TYPE_MAP = {
        "any": "interface{}",
        "boolean": "bool",
        "integer": "int64",
        "number": "float64",
        "string": "string",
    }

    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    def generate(self, declarations: list[tuple[str, StructDef]], generation_comment: str = "") -> str:
        out = self.prefix_template.render(
            generation_comment=generation_comment,
            package_name=self.config.package_name,
        )
        out += "\n\n".join(self.render_declaration(name, body) for name, body in declarations)
        out = out.rstrip("\n")
        return out + "\n" if out else ""

    def render_declaration(self, name: str, body: StructDef) -> str:
        """Render `type <name> struct {...}`."""
        return self.type_template.render(name=name, body=self.render_struct(body))

    def translate_type(self, type_ref: TypeRef, depth: int = 0) -> str:
        match type_ref.kind:
            case TypeKind.ANY:
                return self.TYPE_MAP["any"]
            case TypeKind.PRIMITIVE:
                return self.TYPE_MAP[type_ref.name]
            case TypeKind.NAMED:
                return type_ref.name
            case TypeKind.ARRAY:
                return "[]" + self.translate_type(type_ref.type_args[0], depth)
            case TypeKind.MAP:
                return "map[string]" + self.translate_type(type_ref.type_args[0], depth)
            case TypeKind.STRUCT:
                return self.render_struct(type_ref.struct, depth)
        raise ValueError(f"Unsupported type kind: {type_ref.kind}")

    def render_struct(self, struct: StructDef, depth: int = 0) -> str:
        """
        Render a struct body.

        Consecutive single-line fields are aligned in columns; a field whose
        type spans several lines ends the current column block.

        Args:
            struct: The composite body
            depth: Indentation depth of the line holding `struct {`

        Returns:
            The struct type text, starting with `struct {` and ending with `}`
        """
        field_indent = INDENT * (depth + 1)
        lines: list[str] = []
        block: list[tuple[str, str, str]] = []

        for field_def in struct.fields:
            type_text = self.translate_type(field_def.type_ref, depth + 1)
            tag = self.field_tag(field_def)
            if "\n" in type_text:
                lines.extend(self._align(block, field_indent))
                block = []
                lines.append(f"{field_indent}{field_def.name} {type_text} {tag}")
            else:
                block.append((field_def.name, type_text, tag))
        lines.extend(self._align(block, field_indent))

        return "struct {\n" + "\n".join(lines) + "\n" + INDENT * depth + "}"

    @staticmethod
    def field_tag(field_def: FieldDef) -> str:
        """Serialization tag carrying the original property key."""
        return f"`json:{json.dumps(field_def.json_name, ensure_ascii=False)}`"

    @staticmethod
    def _align(block: list[tuple[str, str, str]], indent: str) -> list[str]:
        if not block:
            return []
        name_width = max(len(name) for name, _, _ in block)
        type_width = max(len(type_text) for _, type_text, _ in block)
        return [f"{indent}{name.ljust(name_width)} {type_text.ljust(type_width)} {tag}" for name, type_text, tag in block]
