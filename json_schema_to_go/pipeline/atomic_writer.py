"""
Atomic file writer for generated code.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputValidationError

logger = logging.getLogger(__name__)

# Struct tags may contain braces, they do not count towards nesting
_RAW_STRING = re.compile(r"`[^`]*`")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(
        self,
        validate_go: Callable[[str], None] | None = None,
        package_name: str = "",
    ):
        """Initialize the atomic writer.

        Args:
            validate_go: Optional validation function for Go code
            package_name: Package clause the Go code must declare, if any
        """
        self._validate_go = validate_go or self._default_validate_go
        self._package_name = package_name

    def write(self, path: Path, content: str, validate: bool = True, atomic: bool = True) -> None:
        """Write content to file.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing
            atomic: Whether to go through a temporary file

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        if validate:
            self._validate_go(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        if not atomic:
            path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", path)
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True, atomic: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True if the file was written

        Raises:
            FileExistsError: If the file already exists
            OutputValidationError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate, atomic)
        return True

    def _default_validate_go(self, content: str) -> None:
        """Default Go validation.

        Args:
            content: Go code to validate

        Raises:
            OutputValidationError: If validation fails
        """
        if self._package_name and not re.search(rf"^package {re.escape(self._package_name)}$", content, re.MULTILINE):
            raise OutputValidationError(f"Generated Go code is missing package clause for {self._package_name}")

        # Balanced braces (simple heuristic)
        stripped = _RAW_STRING.sub("", content)
        open_braces = stripped.count("{")
        close_braces = stripped.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated Go code has unbalanced braces: {open_braces} open, {close_braces} close")
