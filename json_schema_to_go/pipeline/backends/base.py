"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import StructDef, TypeRef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from schema keywords to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Line comment marker
    COMMENT_PREFIX: str = "//"

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.type_template = self.jinja_env.get_template(f"type.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, declarations: list[tuple[str, StructDef]], generation_comment: str = "") -> str:
        """
        Generate code for a sequence of named types.

        Args:
            declarations: (type name, body) pairs, in output order
            generation_comment: Comment line placed at the top, if any

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef, depth: int = 0) -> str:
        """
        Translate a type expression to a language-specific type string.

        Args:
            type_ref: The type expression
            depth: Indentation depth of the line the type starts on

        Returns:
            Language-specific type string
        """
