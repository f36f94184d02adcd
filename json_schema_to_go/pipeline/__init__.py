"""
Pipeline - JSON Schema to Go struct generator.

1. Parser: Decode schema documents into SchemaNode trees
2. Analyzer: Resolve $ref and extends, synthesize type expressions
3. Backend: Render registered types as Go declarations
4. Formatter: Optional post-processing with gofmt
5. Writer: Optional atomic write to an output file
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import OutputValidationError, ResolutionError, SchemaError, SchemaTypeError, StructGenError
from .generator import GenerationResult, PipelineGenerator

__all__ = [
    "AtomicWriter",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "GenerationResult",
    "OutputConfig",
    "OutputMode",
    "OutputValidationError",
    "PipelineGenerator",
    "ResolutionError",
    "SchemaError",
    "SchemaTypeError",
    "StructGenError",
]
