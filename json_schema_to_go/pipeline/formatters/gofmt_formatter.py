"""
gofmt formatter for Go code.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class GofmtFormatter(Formatter):
    """Formatter piping Go source through gofmt."""

    def __init__(self):
        self._available: dict[str, bool] = {}

    def is_available(self, config: FormatterConfig) -> bool:
        """Check if the configured gofmt executable is on the PATH."""
        executable = config.command[0] if config.command else ""
        if executable not in self._available:
            self._available[executable] = bool(executable) and shutil.which(executable) is not None
        return self._available[executable]

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Go code using gofmt.

        Args:
            code: Go source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if gofmt is unavailable or fails
        """
        if not self.is_available(config):
            logger.warning("Formatter %s not found, leaving output unformatted", " ".join(config.command))
            return code

        try:
            result = subprocess.run(
                config.command,
                input=code,
                capture_output=True,
                text=True,
                timeout=config.timeout,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("Formatter %s failed: %s", config.command[0], e)
            return code

        if result.returncode != 0:
            logger.warning("Formatter %s rejected the output: %s", config.command[0], result.stderr.strip())
            return code
        return result.stdout


def format_with_gofmt(code: str, timeout: int = 30) -> str:
    """
    Convenience function to format Go code with gofmt.

    Args:
        code: Go source code
        timeout: Seconds before gofmt is abandoned

    Returns:
        Formatted code
    """
    formatter = GofmtFormatter()
    config = FormatterConfig(enabled=True, timeout=timeout)
    return formatter.format(code, config)
