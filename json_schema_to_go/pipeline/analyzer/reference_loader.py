"""
Reference loader for schema documents.

Reads schema documents from disk and decodes them into SchemaNode trees.
All $ref paths are resolved against the directory of the entry document,
anchored once when the loader is created.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import ResolutionError
from ..schema_ast import SchemaNode, SchemaParser

logger = logging.getLogger(__name__)


class ReferenceLoader:
    """Loads schema documents relative to a fixed root directory."""

    def __init__(self, root: Path, relative_to_document: bool = False, parser: SchemaParser | None = None):
        """
        Initialize the loader.

        Args:
            root: Directory containing the entry document
            relative_to_document: Resolve a $ref against the directory of the
                document holding it instead of the entry document's directory
            parser: Parser used to decode documents
        """
        self.root = Path(root)
        self.relative_to_document = relative_to_document
        self.parser = parser or SchemaParser()

    @classmethod
    def for_entry(cls, entry: Path, relative_to_document: bool = False) -> tuple[ReferenceLoader, str]:
        """Create a loader anchored at the entry document's directory.

        Returns:
            The loader and the entry document's path relative to its root
        """
        entry = Path(entry)
        return cls(entry.parent, relative_to_document), entry.name

    def load(self, path: str) -> SchemaNode:
        """
        Load a schema document into a new node.

        Args:
            path: Document path, relative to the root

        Returns:
            The decoded root node of the document

        Raises:
            ResolutionError: If the document cannot be read or decoded
        """
        return self.load_into(path, SchemaNode())

    def load_into(self, path: str, node: SchemaNode, base_dir: Path | None = None) -> SchemaNode:
        """
        Load a schema document into an existing node.

        Args:
            path: Document path
            node: Destination node; fields present in the document replace its fields
            base_dir: Directory of the document holding the reference (only
                used when resolving relative to documents)

        Returns:
            The same node

        Raises:
            ResolutionError: If the document cannot be read or decoded
        """
        file_path = self.locate(path, base_dir)
        raw = self._read(path, file_path)
        logger.debug("Loaded schema document %s", file_path)
        return self.parser.parse_into(node, raw, f"{path}#", file_path.parent)

    def locate(self, path: str, base_dir: Path | None = None) -> Path:
        """Return the file a reference points at."""
        if self.relative_to_document and base_dir is not None:
            return base_dir / path
        return self.root / path

    @staticmethod
    def _read(path: str, file_path: Path):
        try:
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise ResolutionError(f"Ref not found: {path} ({e.strerror or e})") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResolutionError(f"Ref {path} is not valid JSON: {e}") from e
