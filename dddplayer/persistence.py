"""In-memory repositories for architecture objects and relations."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from dddplayer.radix import Tree, WalkState, WalkStatus


class ObjectNotFoundError(LookupError):
    """Raised when an identifier names no stored object."""


class Relations:
    """An append-only list of relations."""

    def __init__(self) -> None:
        self.relations: list[Any] = []

    def insert(self, relation: Any) -> None:
        """Store a relation."""
        self.relations.append(relation)

    def walk(self, walker: Callable[[Any], None]) -> None:
        """Call ``walker`` on every relation; report failures and keep going."""
        for relation in self.relations:
            try:
                walker(relation)
            except Exception as err:  # noqa: BLE001 - reported, then skipped
                print("relations Walk error: ", err)


def _is_object(value: Any) -> bool:
    return hasattr(value, "identifier")


class RadixRepository:
    """Objects keyed by their identifier's id in a radix tree."""

    def __init__(self) -> None:
        self.tree = Tree()
        self._ids: dict[str, Any] = {}

    def find(self, identifier: Any) -> Any:
        """Return the object stored under ``identifier``, or None."""
        try:
            value = self.tree.get(identifier.id)
        except KeyError:
            return None
        return value if _is_object(value) else None

    def insert(self, obj: Any) -> None:
        """Store ``obj`` under its identifier, replacing any previous object."""
        identifier = obj.identifier
        self.tree.insert(identifier.id, obj)
        self._ids.setdefault(identifier.id, identifier)

    def all(self) -> list[Any]:
        """Return the identifiers of every stored object."""
        return list(self._ids.values())

    def walk(self, callback: Callable[[Any], None]) -> None:
        """Call ``callback`` on each object in key order; stop at the first exception."""

        def visit(prefix: str, value: Any, state: WalkState) -> WalkStatus:
            if state == WalkState.IN and _is_object(value):
                try:
                    callback(value)
                except Exception:  # noqa: BLE001 - an error ends the walk
                    return WalkStatus.STOP
            return WalkStatus.CONTINUE

        self.tree.walk(visit)

    def get_objects(self, identifiers: Iterable[Any]) -> list[Any]:
        """Return the objects for ``identifiers``; raise if any is missing."""
        objects = []
        for identifier in identifiers:
            obj = self.find(identifier)
            if obj is None:
                raise ObjectNotFoundError(f"object {identifier.id} not found")
            objects.append(obj)
        return objects