"""JSON Schema to Go Generator

Generates Go struct declarations from JSON Schema documents, resolving
file references and `extends` inheritance.
"""

__version__ = "1.0.0"

from .pipeline import (  # noqa: E402
    CodeGeneratorConfig,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    ResolutionError,
    SchemaError,
    SchemaTypeError,
    StructGenError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "StructGenError",
    "ResolutionError",
    "SchemaError",
    "SchemaTypeError",
]
