#!/usr/bin/env python3
"""
Lichen - Signatures

A Signature is an ordered tuple of clades describing a multi-slot type
constraint, e.g. the token types a transition consumes from one place. Slots
may be named with a symbol; guards refer to slots by these symbols.

Signatures are ordered by the product order over clades, restricted to
monotone tuples: every slot must move in the same direction (or stay equal)
for two signatures to be comparable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from .clade import Clade, Relation, compare as compare_clades
from .exceptions import SignatureError


@dataclass(frozen=True)
class Signature:
    """
    Positional type tuple.

    Attributes:
        clades: Required clade per slot, in slot order
        symbols: Optional name per slot (None for an unnamed slot). Symbols
            do not take part in equality or ordering.
    """
    clades: Tuple[Clade, ...] = ()
    symbols: Tuple[Optional[str], ...] = field(default=(), compare=False)

    def __post_init__(self):
        clades = tuple(self.clades)
        symbols = tuple(self.symbols) if self.symbols else (None,) * len(clades)

        if len(symbols) != len(clades):
            raise SignatureError(
                f"Signature has {len(clades)} slots but {len(symbols)} symbols"
            )
        named = [s for s in symbols if s is not None]
        if len(named) != len(set(named)):
            raise SignatureError(f"Duplicate slot symbols in signature: {named}")

        object.__setattr__(self, 'clades', clades)
        object.__setattr__(self, 'symbols', symbols)

    @classmethod
    def of(cls, *clades: Clade) -> "Signature":
        return cls(clades)

    @classmethod
    def named(cls, slots: Mapping[str, Clade]) -> "Signature":
        """Build a signature whose slots are all named, in mapping order"""
        return cls(tuple(slots.values()), tuple(slots.keys()))

    def __len__(self) -> int:
        return len(self.clades)

    def __iter__(self):
        return iter(self.clades)

    def __getitem__(self, index):
        return self.clades[index]

    def slots(self) -> List[Tuple[Optional[str], Clade]]:
        return list(zip(self.symbols, self.clades))

    def bound_symbols(self) -> List[str]:
        """Symbols of the named slots, in slot order"""
        return [s for s in self.symbols if s is not None]

    def admits(self, candidates: Sequence[Clade]) -> bool:
        """
        Check whether candidate clades can fill every slot.

        True if the candidates can be assigned to distinct slots so that each
        slot receives a clade at or below its own. Extra candidates are
        allowed; fewer candidates than slots never fit.
        """
        if len(candidates) < len(self.clades):
            return False

        fits = [
            [i for i, candidate in enumerate(candidates) if candidate <= slot]
            for slot in self.clades
        ]
        return _has_matching(fits)

    # Partial order
    def __lt__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return compare(self, other) is Relation.LESS

    def __le__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return compare(self, other) in (Relation.LESS, Relation.EQUAL)

    def __gt__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return compare(self, other) is Relation.GREATER

    def __ge__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return compare(self, other) in (Relation.GREATER, Relation.EQUAL)

    def __repr__(self):
        slots = ", ".join(
            f"{symbol}: {clade.name}" if symbol else clade.name
            for symbol, clade in self.slots()
        )
        return f"Signature([{slots}])"


def compare(a: Signature, b: Signature) -> Relation:
    """
    Compare two signatures slot by slot.

    Signatures of different lengths are INCOMPARABLE. Otherwise the result is
    EQUAL if every slot is equal, GREATER (or LESS) if every slot is greater
    (or less) or equal with at least one strict slot, and INCOMPARABLE for any
    mixture of directions or any incomparable slot.
    """
    if len(a.clades) != len(b.clades):
        return Relation.INCOMPARABLE

    relations = {compare_clades(x, y) for x, y in zip(a.clades, b.clades)}
    relations.discard(Relation.EQUAL)

    match len(relations):
        case 0:
            return Relation.EQUAL
        case 1:
            (only,) = relations
            return only
        case _:
            return Relation.INCOMPARABLE


def _has_matching(fits: List[List[int]]) -> bool:
    """Bipartite matching of slots to candidate indexes (augmenting paths)"""
    owner = {}

    def assign(slot: int, seen: set) -> bool:
        for candidate in fits[slot]:
            if candidate in seen:
                continue
            seen.add(candidate)
            if candidate not in owner or assign(owner[candidate], seen):
                owner[candidate] = slot
                return True
        return False

    return all(assign(slot, set()) for slot in range(len(fits)))
