"""
Registry of named composite types collected during one generation run.
"""

from __future__ import annotations

import logging

from .ir_nodes import StructDef

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Maps synthesized type names to their bodies.

    The first registration of a name wins; later registrations of the same
    name are ignored. Entries are read back sorted by name.
    """

    def __init__(self):
        self._types: dict[str, StructDef] = {}

    def register(self, name: str, body: StructDef) -> bool:
        """
        Register a named type.

        Args:
            name: Type name (already prefixed)
            body: Composite body

        Returns:
            True if the name was new, False if it was already registered
        """
        if name in self._types:
            logger.debug("Type %s already registered, keeping first definition", name)
            return False
        self._types[name] = body
        logger.debug("Registered type %s", name)
        return True

    def get(self, name: str) -> StructDef | None:
        return self._types.get(name)

    def entries(self) -> list[tuple[str, StructDef]]:
        """Return all (name, body) pairs in ascending name order."""
        return [(name, self._types[name]) for name in sorted(self._types)]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)
