"""
Pipeline generator: schema document in, Go declarations out.

1. Load the entry document (root anchored at its directory)
2. Resolve and synthesize the root type, filling a fresh TypeRegistry
3. Render the registry entries in name order with the Go backend
4. Optionally format with gofmt and write the file atomically
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer import InheritanceResolver, ReferenceLoader, StructDef, TypeRef, TypeRegistry, TypeSynthesizer
from .atomic_writer import AtomicWriter
from .backends import GoBackend
from .config import CodeGeneratorConfig, OutputMode
from .formatters import GofmtFormatter

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Output of one synthesis run."""

    root_type: TypeRef
    declarations: list[tuple[str, StructDef]] = field(default_factory=list)


class PipelineGenerator:
    """Generates Go struct declarations from a JSON Schema document."""

    def __init__(self, schema_path: str | Path, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema_path: Path to the entry schema document
            config: Generation options
        """
        self.schema_path = Path(schema_path)
        self.config = config or CodeGeneratorConfig()
        self.backend = GoBackend(self.config)
        self.formatter = GofmtFormatter()

    def synthesize(self, collapse_root: bool = True) -> GenerationResult:
        """
        Run resolution and type synthesis once.

        Every call starts from a fresh loader and registry.

        Args:
            collapse_root: Return the root as a reference when it is a named struct

        Returns:
            The root type expression and the registered declarations
        """
        loader, entry = ReferenceLoader.for_entry(self.schema_path, self.config.resolve_refs_relative_to_document)
        registry = TypeRegistry()
        synthesizer = TypeSynthesizer(InheritanceResolver(loader), registry, self.config.struct_prefix)

        logger.debug("Generating types from %s", self.schema_path)
        root = loader.load(entry)
        root_type = synthesizer.type_of(root, collapse_named=collapse_root)
        logger.debug("Synthesized %d named types", len(registry))
        return GenerationResult(root_type=root_type, declarations=registry.entries())

    def declarations(self) -> list[tuple[str, StructDef]]:
        """Registered (name, body) pairs in ascending name order."""
        return self.synthesize().declarations

    def root_type(self) -> TypeRef:
        """The root type expression with its full inline body."""
        return self.synthesize(collapse_root=False).root_type

    def generate(self) -> str:
        """
        Generate the Go source.

        Raises:
            StructGenError: If resolution or synthesis fails
        """
        result = self.synthesize()
        code = self.backend.generate(result.declarations, self._generation_comment())
        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)
        return code

    def write(self, output: str | Path) -> str:
        """
        Generate and write the Go source to a file.

        Raises:
            FileExistsError: If the file exists and output mode is not force
            StructGenError: If generation or validation fails
        """
        code = self.generate()
        path = Path(output)
        writer = AtomicWriter(package_name=self.config.package_name)
        output_config = self.config.output
        if output_config.mode == OutputMode.FORCE:
            writer.write(path, code, output_config.validate_before_write, output_config.atomic_write)
        else:
            writer.write_if_not_exists(path, code, output_config.validate_before_write, output_config.atomic_write)
        return code

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..json_schema_to_go import json_schema_to_go as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "json_schema_to_go"

        return f"{self.backend.COMMENT_PREFIX} Code generated by json_schema_to_go v{__version__} : {command_line}. DO NOT EDIT."
