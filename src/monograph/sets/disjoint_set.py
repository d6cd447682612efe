"""Disjoint-set (union-find) collection with path compression."""

from collections.abc import Hashable, Iterable
from typing import Any

from monograph.errors import DuplicateItemError, ItemNotFoundError

__all__ = ["DisjointSet"]

_NO_REPRESENTATIVE: Any = object()


class DisjointSet:
    """Incremental partition of items into disjoint sets.

    Each item points at a parent; a representative points at itself.
    ``find`` flattens lookup chains as a side effect. Union is asymmetric
    and performs no balancing: the first argument's representative always
    becomes the parent of the second's.

    Attributes
    ----------
    parent : dict[Hashable, Hashable]
        Parent pointer for each item.
    count : int
        Number of distinct sets (not items).

    Notes
    -----
    ``find`` mutates the structure, so an instance must not be shared
    between threads without external locking.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        """Initialize the collection, one singleton set per item.

        Parameters
        ----------
        items : Iterable[Hashable], optional
            Items to add as singleton sets, by default none.
        """
        self.parent: dict[Hashable, Hashable] = {}
        self.count = 0

        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, item: object) -> bool:
        return item in self.parent

    def add(self, item: Hashable, representative: Hashable = _NO_REPRESENTATIVE) -> None:
        """Add ``item`` as a new set, optionally joining an existing one.

        Parameters
        ----------
        item : Hashable
            Item to add.
        representative : Hashable, optional
            Any member of the set ``item`` should join; ``item`` becomes the
            representative of the merged set. If omitted, ``item`` stays a
            singleton.

        Raises
        ------
        DuplicateItemError
            If ``item`` was already added.
        ItemNotFoundError
            If ``representative`` was never added.
        """
        if item in self.parent:
            raise DuplicateItemError(f"Item {item!r} is already in the disjoint set", item=item)

        if representative is not _NO_REPRESENTATIVE and representative not in self.parent:
            raise ItemNotFoundError(
                f"Item {representative!r} is not in the disjoint set", item=representative
            )

        self.parent[item] = item
        self.count += 1

        if representative is not _NO_REPRESENTATIVE:
            self.union(item, representative)

    def find(self, item: Hashable) -> Any:
        """Return the representative of the set containing ``item``.

        Every item visited on the way is re-pointed directly at the
        representative.

        Parameters
        ----------
        item : Hashable
            Item to look up.

        Returns
        -------
        Hashable
            Representative item.

        Raises
        ------
        ItemNotFoundError
            If ``item`` was never added.
        """
        if item not in self.parent:
            raise ItemNotFoundError(f"Item {item!r} is not in the disjoint set", item=item)

        root = item
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while item != root:
            next_item = self.parent[item]
            self.parent[item] = root
            item = next_item

        return root

    def union(self, first: Hashable, second: Hashable) -> None:
        """Merge the sets containing ``first`` and ``second``.

        The representative of ``first`` becomes the parent of the
        representative of ``second``. No-op if both are already joined.

        Parameters
        ----------
        first : Hashable
            Item whose representative survives.
        second : Hashable
            Item whose set is attached.
        """
        root_first = self.find(first)
        root_second = self.find(second)

        if root_first == root_second:
            return

        self.parent[root_second] = root_first
        self.count -= 1

    def same_set(self, first: Hashable, second: Hashable) -> bool:
        """Return True if both items belong to the same set."""
        return self.find(first) == self.find(second)

    def get_components(self) -> list[list[Any]]:
        """Get all sets.

        Returns
        -------
        list[list[Hashable]]
            One list of members per set, members and sets in insertion order.
        """
        components_dict: dict[Hashable, list[Any]] = {}

        for element in list(self.parent):
            root = self.find(element)
            if root not in components_dict:
                components_dict[root] = []
            components_dict[root].append(element)

        return list(components_dict.values())
