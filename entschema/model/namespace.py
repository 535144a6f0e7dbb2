"""
Namespace tree of root entities.

The tree is built top-down from the namespace paths of the root entity
types: each node owns the types declared exactly at its path and one child
per distinct next path segment. Declaration order does not matter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from ..errors import UndefinedNamespaceError

if TYPE_CHECKING:
    from .types import RootEntityType


class Namespace:
    """A node in the namespace tree.

    Attributes:
        parent: Parent namespace (None for the root)
        path: Segments from the root to this namespace
        root_entity_types: Root entities declared directly in this namespace
        child_namespaces: Direct children, in order of first appearance
    """

    def __init__(
        self,
        parent: Optional[Namespace],
        path: Sequence[str],
        all_root_entity_types: Sequence[RootEntityType],
    ) -> None:
        self.parent = parent
        self.path = tuple(path)
        depth = len(self.path)

        self.root_entity_types = tuple(t for t in all_root_entity_types if t.namespace_path == self.path)

        child_names: list[str] = []
        for t in all_root_entity_types:
            ns_path = t.namespace_path
            if len(ns_path) > depth and ns_path[:depth] == self.path and ns_path[depth] not in child_names:
                child_names.append(ns_path[depth])

        self.child_namespaces = tuple(
            Namespace(self, (*self.path, name), all_root_entity_types) for name in child_names
        )
        self._child_map = {ns.name: ns for ns in self.child_namespaces}

    @property
    def name(self) -> Optional[str]:
        """Last path segment (None for the root namespace)."""
        return self.path[-1] if self.path else None

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def descendant_namespaces(self) -> tuple[Namespace, ...]:
        """All namespaces below this one, depth-first."""
        result: list[Namespace] = []
        for child in self.child_namespaces:
            result.append(child)
            result.extend(child.descendant_namespaces)
        return tuple(result)

    @property
    def all_root_entity_types(self) -> tuple[RootEntityType, ...]:
        """Root entities of this namespace and all descendants."""
        result = list(self.root_entity_types)
        for ns in self.descendant_namespaces:
            result.extend(ns.root_entity_types)
        return tuple(result)

    def get_child_namespace(self, name: str) -> Optional[Namespace]:
        return self._child_map.get(name)

    def get_child_namespace_or_throw(self, name: str) -> Namespace:
        child = self.get_child_namespace(name)
        if child is None:
            raise UndefinedNamespaceError((*self.path, name))
        return child

    def __repr__(self) -> str:
        return f"Namespace({self.dotted_path or '<root>'!r})"
