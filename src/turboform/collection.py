from collections.abc import Callable, Iterator
from typing import Any

from .node import iter_tree


class HTMLFormControlsCollection:
    """Live, read-only view of the descendants of ``root`` accepted by ``predicate``.

    Nothing is cached: every read walks the current tree, so insertions and
    removals show up on the next access without a refresh.
    """

    __slots__ = ("_predicate", "_root")

    def __init__(self, root: Any, predicate: Callable[[Any], bool]) -> None:
        self._root = root
        self._predicate = predicate

    def _snapshot(self) -> list[Any]:
        root = self._root
        predicate = self._predicate
        return [node for node in iter_tree(root) if node is not root and predicate(node)]

    @property
    def length(self) -> int:
        return len(self._snapshot())

    def __len__(self) -> int:
        return len(self._snapshot())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __getitem__(self, index: int | str) -> Any:
        if isinstance(index, str):
            node = self.named_item(index)
            if node is None:
                raise KeyError(index)
            return node
        return self._snapshot()[index]

    def __contains__(self, node: object) -> bool:
        return any(candidate is node for candidate in self._snapshot())

    def item(self, index: int) -> Any:
        """Return the element at ``index`` or None when out of range."""
        items = self._snapshot()
        if 0 <= index < len(items):
            return items[index]
        return None

    def named_item(self, name: str) -> Any:
        """Return the first element whose id or name attribute equals ``name``."""
        if not name:
            return None
        for node in self._snapshot():
            if node.attributes.get("id") == name or node.attributes.get("name") == name:
                return node
        return None

    def __repr__(self) -> str:
        return f"HTMLFormControlsCollection(length={len(self)})"
