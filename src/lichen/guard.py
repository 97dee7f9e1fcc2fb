#!/usr/bin/env python3
"""
Lichen - Guards

A Guard is a predicate tree evaluated against a binding of keys to clades.
Leaf predicates test the clade bound to one key against a reference clade
using the taxonomy order; combinators fold their sub-guards.

The variant set is closed:

    Is, Not, GreaterThan, LessThan, GreaterThanOrEqual, LessThanOrEqual
    AllOf, AnyOf, NoneOf
    Empty

Ordered predicates read as "the reference clade is <relation> the bound
clade". ``GreaterThanOrEqual("x", vehicle)`` therefore holds when ``x`` is
bound to ``vehicle`` or to anything in its subtree.

This reverses the reading of the older Rust guards, where
``GreaterThan(c)`` held for candidates greater than ``c``. Guards ported from
there need the ordered variants swapped (GreaterThan <-> LessThan and
GreaterThanOrEqual <-> LessThanOrEqual).

Evaluation fails closed: a predicate whose key is missing from the binding is
False, never an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Mapping, Tuple

from .clade import Clade, Relation, compare


Binding = Mapping[str, Clade]


class Guard(ABC):
    """Base class for all guard variants"""
    TAG: ClassVar[str]

    @abstractmethod
    def evaluate(self, binding: Binding) -> bool:
        """Evaluate the guard against a binding of keys to clades"""

    def walk(self) -> Iterator["Guard"]:
        """Yield this guard and every sub-guard in pre-order"""
        yield self

    def keys(self) -> List[str]:
        """Every key referenced by a leaf predicate, in pre-order"""
        return [node.key for node in self.walk() if isinstance(node, Predicate)]


# ============================================================================
# Leaf predicates
# ============================================================================

@dataclass(frozen=True)
class Predicate(Guard):
    """A test on the clade bound to ``key``"""
    key: str
    clade: Clade

    def evaluate(self, binding: Binding) -> bool:
        bound = binding.get(self.key)
        if bound is None:
            return False
        return self.holds(bound)

    @abstractmethod
    def holds(self, bound: Clade) -> bool:
        ...

    def __repr__(self):
        return f"{self.TAG}({self.key!r}, {self.clade.name!r})"


@dataclass(frozen=True, repr=False)
class Is(Predicate):
    TAG: ClassVar[str] = "Is"

    def holds(self, bound: Clade) -> bool:
        return bound == self.clade


@dataclass(frozen=True, repr=False)
class Not(Predicate):
    TAG: ClassVar[str] = "Not"

    def holds(self, bound: Clade) -> bool:
        return bound != self.clade


@dataclass(frozen=True, repr=False)
class GreaterThan(Predicate):
    TAG: ClassVar[str] = "GreaterThan"

    def holds(self, bound: Clade) -> bool:
        return compare(self.clade, bound) is Relation.GREATER


@dataclass(frozen=True, repr=False)
class LessThan(Predicate):
    TAG: ClassVar[str] = "LessThan"

    def holds(self, bound: Clade) -> bool:
        return compare(self.clade, bound) is Relation.LESS


@dataclass(frozen=True, repr=False)
class GreaterThanOrEqual(Predicate):
    TAG: ClassVar[str] = "GreaterThanOrEqual"

    def holds(self, bound: Clade) -> bool:
        return compare(self.clade, bound) in (Relation.GREATER, Relation.EQUAL)


@dataclass(frozen=True, repr=False)
class LessThanOrEqual(Predicate):
    TAG: ClassVar[str] = "LessThanOrEqual"

    def holds(self, bound: Clade) -> bool:
        return compare(self.clade, bound) in (Relation.LESS, Relation.EQUAL)


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True)
class Combinator(Guard):
    """A fold over an ordered sequence of sub-guards"""
    guards: Tuple[Guard, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'guards', tuple(self.guards))

    def walk(self) -> Iterator[Guard]:
        yield self
        for guard in self.guards:
            yield from guard.walk()

    def __repr__(self):
        return f"{self.TAG}({list(self.guards)!r})"


@dataclass(frozen=True, repr=False)
class AllOf(Combinator):
    """Conjunction; an empty AllOf is True"""
    TAG: ClassVar[str] = "All"

    def evaluate(self, binding: Binding) -> bool:
        return all(guard.evaluate(binding) for guard in self.guards)


@dataclass(frozen=True, repr=False)
class AnyOf(Combinator):
    """Disjunction; an empty AnyOf is False"""
    TAG: ClassVar[str] = "Any"

    def evaluate(self, binding: Binding) -> bool:
        return any(guard.evaluate(binding) for guard in self.guards)


@dataclass(frozen=True, repr=False)
class NoneOf(Combinator):
    """True when no sub-guard holds; an empty NoneOf is True"""
    TAG: ClassVar[str] = "None"

    def evaluate(self, binding: Binding) -> bool:
        return not any(guard.evaluate(binding) for guard in self.guards)


# ============================================================================
# Unconstrained
# ============================================================================

@dataclass(frozen=True)
class Empty(Guard):
    """The unconstrained guard, True for every binding"""
    TAG: ClassVar[str] = "Empty"

    def evaluate(self, binding: Binding) -> bool:
        return True

    def __repr__(self):
        return "Empty()"


EMPTY = Empty()

PREDICATES: Tuple[type, ...] = (
    Is, Not, GreaterThan, LessThan, GreaterThanOrEqual, LessThanOrEqual,
)
COMBINATORS: Tuple[type, ...] = (AllOf, AnyOf, NoneOf)

# Interchange tag -> variant class
GUARD_TYPES = {cls.TAG: cls for cls in (*PREDICATES, *COMBINATORS, Empty)}
