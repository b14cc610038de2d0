"""
Index store - holds extracted token indices by name.

Indices live in memory for the lifetime of the server; clients extract a
theme once and resolve many batches of design values against it.
"""

from __future__ import annotations

from datetime import UTC, datetime

from chuk_mcp_tokens.models.token import ProjectTokenIndex


class StoredIndex:
    """A named token index and where it came from."""

    def __init__(
        self,
        name: str,
        index: ProjectTokenIndex,
        sources: list[str],
        config_name: str,
        created: datetime,
    ):
        self.name = name
        self.index = index
        self.sources = sources
        self.config_name = config_name
        self.created = created

    @property
    def has_project_theme(self) -> bool:
        """Whether the index was extracted from at least one theme file."""
        return bool(self.sources)

    def __repr__(self) -> str:
        return f"StoredIndex({self.name!r}, {len(self.sources)} sources, {self.index.count()} keys)"


class IndexStore:
    """
    Keeps named token indices in memory.

    Putting an index under an existing name replaces it.
    """

    def __init__(self) -> None:
        self._indices: dict[str, StoredIndex] = {}

    async def put(
        self,
        name: str,
        index: ProjectTokenIndex,
        sources: list[str] | None = None,
        config_name: str = "default",
    ) -> StoredIndex:
        """
        Store an index.

        Args:
            name: Index name
            index: The token index
            sources: Theme files the index was extracted from
            config_name: Name of the config used for extraction

        Returns:
            The stored entry
        """
        stored = StoredIndex(
            name=name,
            index=index,
            sources=list(sources or []),
            config_name=config_name,
            created=datetime.now(UTC),
        )
        self._indices[name] = stored
        return stored

    async def get(self, name: str) -> StoredIndex | None:
        """Get a stored index by name."""
        return self._indices.get(name)

    async def list(self) -> list[StoredIndex]:
        """List stored indices, sorted by name."""
        return [self._indices[name] for name in sorted(self._indices)]

    async def delete(self, name: str) -> bool:
        """
        Delete a stored index.

        Returns:
            True if an index was deleted
        """
        return self._indices.pop(name, None) is not None
