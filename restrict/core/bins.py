# restrict/core/bins.py
"""
Bin bookkeeping for fragment assembly.

While walking the cut space each strand writes indices into its current bin.
Opening a bin starts a new candidate fragment on one strand; joining two bins
records that both strands are still attached at an index. Joins are kept in a
disjoint-set forest whose root is always the smallest bin id, so that
fragments come out in the order their first bin was opened.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

SENTINEL_BIN = -1


@dataclass
class BinContents:
    """Indices collected for one bin id (or one merged group)"""
    bin_id: int
    primary: List[int] = field(default_factory=list)
    complement: List[int] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.primary and not self.complement


class StrandBins:
    """Union-find over bin ids with per-strand index lists"""

    def __init__(self, start: Optional[int] = None):
        """
        Args:
            start: First bin id handed out, or None to start at 0. A linear
                walk starts at the sentinel bin, which is dropped again by
                groups().
        """
        self._parent: Dict[int, int] = {}
        self._contents: Dict[int, BinContents] = {}
        self._next_id = 0 if start is None else start

    def open(self) -> int:
        bin_id = self._next_id
        self._next_id += 1
        self._parent[bin_id] = bin_id
        self._contents[bin_id] = BinContents(bin_id)
        return bin_id

    def find(self, bin_id: int) -> int:
        root = bin_id
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[bin_id] != root:
            self._parent[bin_id], bin_id = root, self._parent[bin_id]
        return root

    def union(self, a: int, b: int) -> int:
        """Join the groups holding ``a`` and ``b``; returns the surviving root"""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a
        root, child = (root_a, root_b) if root_a < root_b else (root_b, root_a)
        self._parent[child] = root
        return root

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def add_primary(self, bin_id: int, index: int) -> None:
        self._contents[bin_id].primary.append(index)

    def add_complement(self, bin_id: int, index: int) -> None:
        self._contents[bin_id].complement.append(index)

    def groups(self, drop_sentinel: bool = True) -> List[BinContents]:
        """Merge each group's bins and return the non-empty groups by root id

        Indices keep the order in which they were added, bin by bin in
        ascending id within a group, so callers re-sort by walk position.
        """
        merged: Dict[int, BinContents] = {}
        for bin_id in sorted(self._contents):
            root = self.find(bin_id)
            group = merged.setdefault(root, BinContents(root))
            group.primary.extend(self._contents[bin_id].primary)
            group.complement.extend(self._contents[bin_id].complement)

        result = []
        for root in sorted(merged):
            if drop_sentinel and root == SENTINEL_BIN:
                continue
            if merged[root].is_empty():
                continue
            result.append(merged[root])
        return result
