#!/usr/bin/env python3
"""
Lichen - Clade Taxonomy

A Clade is a node of a rooted taxonomy tree. Token types in a Lichen net are
clades rather than members of a flat enumeration, and the tree defines a
"broader-than" partial order over them: an ancestor is greater than every node
in its subtree, and nodes in disjoint subtrees are incomparable.

Trees are immutable. Building a modified taxonomy means building a new tree.

Usage:
    from lichen.clade import Clade, compare, Relation

    g1 = Clade.new("grandchild1")
    g2 = Clade.new("grandchild2")
    child = Clade.new("child", [g1, g2])
    root = Clade.new("root", [child])

    assert root.descendant(g1.id)
    assert compare(child, g1) is Relation.GREATER
    assert child > g1
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class Relation(Enum):
    """Outcome of comparing two values under a partial order"""
    EQUAL = auto()
    GREATER = auto()
    LESS = auto()
    INCOMPARABLE = auto()  # No order between the two, not an error


@dataclass(frozen=True, eq=False)
class Clade:
    """
    A node in a taxonomy tree.

    A clade with ``children`` set to None is a leaf; a clade holding a tuple
    of children (possibly empty) is a branch. Identity is the ``id`` alone.

    Attributes:
        name: Display name, not required to be unique
        children: Child clades in order, or None for a leaf
        id: Globally unique identifier assigned at construction
    """
    name: str
    children: Optional[Tuple["Clade", ...]] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))

    @classmethod
    def new(cls, name: str, children: Optional[Iterable["Clade"]] = None) -> "Clade":
        """Create a leaf (no children) or a branch, with a fresh id"""
        if children is None:
            return cls(name)
        return cls(name, tuple(children))

    @property
    def variant(self) -> str:
        return "leaf" if self.children is None else "branch"

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    # ------------------------------------------------------------------
    # Tree queries
    # ------------------------------------------------------------------

    def walk(self) -> Iterator["Clade"]:
        """Yield every clade in this subtree in pre-order"""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def descendant(self, target_id: uuid.UUID) -> bool:
        """True if target_id is this clade or any clade below it"""
        if self.id == target_id:
            return True
        return any(child.descendant(target_id) for child in self.children or ())

    def parentage(self, target_id: uuid.UUID) -> Optional[List[uuid.UUID]]:
        """
        Return the ancestor chain of target_id within this subtree.

        The list runs from the nearest ancestor up to this clade and excludes
        the target. An empty list means this clade is the target; None means
        the target is not in the subtree.
        """
        if self.id == target_id:
            return []
        for child in self.children or ():
            chain = child.parentage(target_id)
            if chain is not None:
                chain.append(self.id)
                return chain
        return None

    def query(self, name: str) -> Optional[uuid.UUID]:
        """Return the id of the first clade named ``name`` in pre-order"""
        for clade in self.walk():
            if clade.name == name:
                return clade.id
        return None

    def get(self, target_id: uuid.UUID) -> Optional["Clade"]:
        """Return the subtree rooted at target_id, if present"""
        for clade in self.walk():
            if clade.id == target_id:
                return clade
        return None

    def to_mermaid(self) -> str:
        """Generate Mermaid diagram of the taxonomy"""
        lines = ["graph TD"]
        for clade in self.walk():
            node = _mermaid_id(clade)
            if clade.is_leaf:
                lines.append(f"    {node}([\"{_mermaid_label(clade)}\"])")
            else:
                lines.append(f"    {node}[\"{_mermaid_label(clade)}\"]")
            for child in clade.children or ():
                lines.append(f"    {node} --> {_mermaid_id(child)}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Identity and order
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Clade):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __lt__(self, other):
        if not isinstance(other, Clade):
            return NotImplemented
        return compare(self, other) is Relation.LESS

    def __le__(self, other):
        if not isinstance(other, Clade):
            return NotImplemented
        return compare(self, other) in (Relation.LESS, Relation.EQUAL)

    def __gt__(self, other):
        if not isinstance(other, Clade):
            return NotImplemented
        return compare(self, other) is Relation.GREATER

    def __ge__(self, other):
        if not isinstance(other, Clade):
            return NotImplemented
        return compare(self, other) in (Relation.GREATER, Relation.EQUAL)

    def __repr__(self):
        return f"Clade({self.name!r}, {self.variant}, {str(self.id)[:8]})"


def compare(a: Clade, b: Clade) -> Relation:
    """
    Compare two clades in the broader-than order.

    An ancestor is GREATER than its descendants. Clades in disjoint subtrees,
    or in unrelated trees, are INCOMPARABLE.
    """
    match (a.descendant(b.id), b.descendant(a.id)):
        case (True, True):
            return Relation.EQUAL
        case (True, False):
            return Relation.GREATER
        case (False, True):
            return Relation.LESS
        case _:
            return Relation.INCOMPARABLE


def _mermaid_id(clade: Clade) -> str:
    return f"c{clade.id.hex}"


def _mermaid_label(clade: Clade) -> str:
    return clade.name.replace("\"", "#quot;")


class CladeIndex:
    """
    Id lookup table layered over an immutable clade tree.

    The tree itself only supports recursive search. For large taxonomies that
    are queried often, build an index once and look nodes up by id. Ancestor
    chains are answered from a parent table built in the same pass.
    """

    def __init__(self, root: Clade):
        self.root = root
        self._nodes: Dict[uuid.UUID, Clade] = {}
        self._parents: Dict[uuid.UUID, uuid.UUID] = {}

        stack = [root]
        while stack:
            clade = stack.pop()
            self._nodes[clade.id] = clade
            for child in clade.children or ():
                self._parents[child.id] = clade.id
                stack.append(child)

    def __contains__(self, target_id: uuid.UUID) -> bool:
        return target_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, target_id: uuid.UUID) -> Optional[Clade]:
        return self._nodes.get(target_id)

    def parentage(self, target_id: uuid.UUID) -> Optional[List[uuid.UUID]]:
        """Same contract as Clade.parentage on the indexed root"""
        if target_id not in self._nodes:
            return None
        chain = []
        current = self._parents.get(target_id)
        while current is not None:
            chain.append(current)
            current = self._parents.get(current)
        return chain

    def query(self, name: str) -> Optional[uuid.UUID]:
        # Pre-order tie breaking lives on the tree, not in the table
        return self.root.query(name)

    def __repr__(self):
        return f"CladeIndex({self.root.name!r}, {len(self)} clades)"
