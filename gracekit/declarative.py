"""Declarative building of named blocks kept in a shared registry.

Blocks are created by a factory, stored under a unique name, and then
handed to an optional content callback that fills them in. Any block
declared this way can later be found again by its name.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, ClassVar, TypeVar

__all__ = [
    "DuplicateBlockError",
    "DeclarativeUIManager",
    "declare",
    "block",
]

T = TypeVar("T")


class DuplicateBlockError(RuntimeError):
    """Raised when a block name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Block with the same name '{name}' already exists.")
        self.name = name


class DeclarativeUIManager:
    """Registry that owns declared blocks by name.

    One shared registry is returned by :meth:`instance`; separate registries
    may also be created directly.
    """

    _shared: ClassVar[DeclarativeUIManager | None] = None

    def __init__(self) -> None:
        self._blocks: dict[str, Any] = {}

    @classmethod
    def instance(cls) -> DeclarativeUIManager:
        """Return the shared registry, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def find_block(self, name: str) -> Any | None:
        """Return the block registered as ``name``, or None."""
        return self._blocks.get(name)

    def find_name(self, block: Any) -> str:
        """Return the name under which ``block`` is registered, or ''."""
        return next(
            (name for name, held in self._blocks.items() if held is block), ""
        )

    def add_block(self, name: str, block: Any) -> None:
        """Register ``block`` as ``name``; the name must not be taken."""
        if name in self._blocks:
            raise DuplicateBlockError(name)
        self._blocks[name] = block

    def remove_block(self, name: str) -> None:
        """Forget the block registered as ``name``; unknown names are ignored."""
        self._blocks.pop(name, None)

    def replace_block(self, name: str, block: Any) -> None:
        """Register ``block`` as ``name``, replacing any block already there."""
        self._blocks[name] = block

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)


def declare(
    name: str,
    factory: Callable[[], T],
    content: Callable[[T], Any] | None = None,
) -> T:
    """Create a block, register it as ``name`` and fill it with ``content``.

    The block is registered before ``content`` runs, so the callback and
    anything it declares can already find it by name.
    """
    created = factory()
    DeclarativeUIManager.instance().add_block(name, created)
    if content is not None:
        content(created)
    return created


def block(name: str) -> Any | None:
    """Return the block declared as ``name`` in the shared registry, or None."""
    return DeclarativeUIManager.instance().find_block(name)