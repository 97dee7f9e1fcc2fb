#!/usr/bin/env python3
"""
Lichen - Taxonomy-Typed Petri Net Core

Token types in a Lichen net are clades: nodes of a taxonomy tree ordered by
descent. Signatures describe per-slot type constraints, guards are predicates
over the taxonomy order, and transitions tie them together with validation
that degrades bad configuration instead of rejecting it.

Usage:
    from lichen import Clade, Signature, Transition, GreaterThanOrEqual

    car = Clade.new("car")
    truck = Clade.new("truck")
    vehicle = Clade.new("vehicle", [car, truck])

    load = Transition.create(
        "load",
        input={"dock": Signature.named({"cargo": vehicle})},
        guard=GreaterThanOrEqual("cargo", vehicle),
    )
    assert load.admits({"cargo": truck})
"""

from .clade import Clade, CladeIndex, Relation, compare as compare_clades
from .signature import Signature, compare as compare_signatures
from .guard import (
    Guard,
    Predicate,
    Combinator,
    Is,
    Not,
    GreaterThan,
    LessThan,
    GreaterThanOrEqual,
    LessThanOrEqual,
    AllOf,
    AnyOf,
    NoneOf,
    Empty,
    EMPTY,
)
from .transition import Transition
from .exceptions import LichenError, SignatureError, InterchangeError

__all__ = [
    # Taxonomy
    'Clade',
    'CladeIndex',
    'Relation',
    'compare_clades',

    # Signatures
    'Signature',
    'compare_signatures',

    # Guards
    'Guard',
    'Predicate',
    'Combinator',
    'Is',
    'Not',
    'GreaterThan',
    'LessThan',
    'GreaterThanOrEqual',
    'LessThanOrEqual',
    'AllOf',
    'AnyOf',
    'NoneOf',
    'Empty',
    'EMPTY',

    # Transitions
    'Transition',

    # Errors
    'LichenError',
    'SignatureError',
    'InterchangeError',
]
