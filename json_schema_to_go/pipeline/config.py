"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the external source formatter."""

    # Whether formatting is enabled
    enabled: bool = True

    # Formatter command, reading source on stdin and writing it on stdout
    command: list[str] = field(default_factory=lambda: ["gofmt"])

    # Seconds before the formatter is abandoned
    timeout: int = 30


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Go package name (no package clause when empty)
    package_name: str = ""

    # Prefix prepended to every generated type name
    struct_prefix: str = "Json"

    # Add generation comment at top of file
    add_generation_comment: bool = False

    # Resolve $ref against the referencing document's directory instead of
    # the entry document's directory
    resolve_refs_relative_to_document: bool = False

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "struct_prefix": self.struct_prefix,
            "add_generation_comment": self.add_generation_comment,
            "resolve_refs_relative_to_document": self.resolve_refs_relative_to_document,
            "formatter": {
                "enabled": self.formatter.enabled,
                "command": list(self.formatter.command),
                "timeout": self.formatter.timeout,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
