#!/usr/bin/env python3
"""
Lichen - Interchange Records

pydantic models for the record shapes Lichen values are exchanged in, and
conversion functions between records and values.

Record shapes (JSON, lowerCamelCase):

    Clade:      {"variant": "branch"|"leaf", "id": "<uuid>", "name": "...",
                 "children": [Clade, ...]}            # branch only
    Signature:  [Slot, ...]                           # Slot = Clade + "symbol"?
    Guard:      {"kind": "Is"|..., "key": "...", "clade": Clade}   # predicates
                {"kind": "All"|"Any"|"None", "guards": [Guard, ...]}
                {"kind": "Empty"}
    Transition: {"id", "name", "input": {place: Signature},
                 "output": {place: Signature}, "guard": Guard}

Clades are embedded as full subtrees wherever they appear, so a loaded guard
or signature can still be compared against the taxonomy order.

Loading a transition goes through Transition.create(), so stored
configuration gets the same guard validation as configuration built in code.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from .clade import Clade
from .exceptions import InterchangeError, SignatureError
from .guard import COMBINATORS, GUARD_TYPES, PREDICATES, Combinator, Empty, Guard, Predicate
from .signature import Signature
from .transition import Transition

logger = logging.getLogger(__name__)


GuardKind = Literal[
    "Is", "Not", "GreaterThan", "LessThan", "GreaterThanOrEqual", "LessThanOrEqual",
    "All", "Any", "None",
    "Empty",
]

_PREDICATE_TAGS = {cls.TAG for cls in PREDICATES}
_COMBINATOR_TAGS = {cls.TAG for cls in COMBINATORS}


# ============================================================================
# Records
# ============================================================================

class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class CladeRecord(Record):
    variant: Literal["branch", "leaf"]
    id: uuid.UUID
    name: str
    children: Optional[List[CladeRecord]] = None

    @model_validator(mode="after")
    def check_variant(self):
        if self.variant == "leaf" and self.children is not None:
            raise ValueError(f"Leaf clade {self.name!r} cannot have children")
        return self


class SlotRecord(CladeRecord):
    """A signature slot: the slot's clade plus its optional symbol"""
    symbol: Optional[str] = None


class GuardRecord(Record):
    kind: GuardKind
    key: Optional[str] = None
    clade: Optional[CladeRecord] = None
    guards: Optional[List[GuardRecord]] = None

    @model_validator(mode="after")
    def check_payload(self):
        if self.kind in _PREDICATE_TAGS:
            if self.key is None or self.clade is None:
                raise ValueError(f"{self.kind} guard requires a key and a clade")
            if self.guards is not None:
                raise ValueError(f"{self.kind} guard cannot carry sub-guards")
        elif self.kind in _COMBINATOR_TAGS:
            if self.key is not None or self.clade is not None:
                raise ValueError(f"{self.kind} guard cannot carry a key or clade")
        elif any(v is not None for v in (self.key, self.clade, self.guards)):
            raise ValueError("Empty guard carries no payload")
        return self


class TransitionRecord(Record):
    id: uuid.UUID
    name: str
    input: Dict[str, List[SlotRecord]] = Field(default_factory=dict)
    output: Dict[str, List[SlotRecord]] = Field(default_factory=dict)
    guard: GuardRecord = Field(default_factory=lambda: GuardRecord(kind="Empty"))


CladeRecord.model_rebuild()
SlotRecord.model_rebuild()
GuardRecord.model_rebuild()
TransitionRecord.model_rebuild()


# ============================================================================
# Value -> record
# ============================================================================

def clade_record(clade: Clade) -> CladeRecord:
    children = None
    if clade.children is not None:
        children = [clade_record(child) for child in clade.children]
    return CladeRecord(variant=clade.variant, id=clade.id, name=clade.name, children=children)


def signature_record(signature: Signature) -> List[SlotRecord]:
    return [
        SlotRecord(**dict(clade_record(clade)), symbol=symbol)
        for symbol, clade in signature.slots()
    ]


def guard_record(guard: Guard) -> GuardRecord:
    match guard:
        case Predicate(key=key, clade=clade):
            return GuardRecord(kind=guard.TAG, key=key, clade=clade_record(clade))
        case Combinator(guards=guards):
            return GuardRecord(kind=guard.TAG, guards=[guard_record(g) for g in guards])
        case Empty():
            return GuardRecord(kind="Empty")
        case _:
            raise InterchangeError(f"Not a guard: {guard!r}")


def transition_record(transition: Transition) -> TransitionRecord:
    return TransitionRecord(
        id=transition.id,
        name=transition.name,
        input={str(p): signature_record(s) for p, s in transition.input.items()},
        output={str(p): signature_record(s) for p, s in transition.output.items()},
        guard=guard_record(transition.guard),
    )


# ============================================================================
# Record -> value
# ============================================================================

def clade_from_record(record: CladeRecord) -> Clade:
    children = None
    if record.variant == "branch":
        children = tuple(clade_from_record(child) for child in record.children or ())
    return Clade(record.name, children, id=record.id)


def signature_from_record(slots: List[SlotRecord]) -> Signature:
    try:
        return Signature(
            tuple(clade_from_record(slot) for slot in slots),
            tuple(slot.symbol for slot in slots),
        )
    except SignatureError as e:
        logger.debug(f"Rejected signature record: {e}")
        raise InterchangeError(f"Invalid signature record: {e}") from e


def guard_from_record(record: GuardRecord) -> Guard:
    cls = GUARD_TYPES[record.kind]
    if record.kind in _PREDICATE_TAGS:
        return cls(record.key, clade_from_record(record.clade))
    if record.kind in _COMBINATOR_TAGS:
        return cls(tuple(guard_from_record(g) for g in record.guards or ()))
    return cls()


def transition_from_record(record: TransitionRecord) -> Transition:
    return Transition.create(
        record.name,
        input={p: signature_from_record(s) for p, s in record.input.items()},
        output={p: signature_from_record(s) for p, s in record.output.items()},
        guard=guard_from_record(record.guard),
        id=record.id,
    )


# ============================================================================
# Plain data (dicts / lists) and JSON
# ============================================================================

def _dump(record: BaseModel) -> Dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True, exclude_none=True)


def _validate(model: type, data: Any, what: str):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Rejected {what} record: {e}")
        raise InterchangeError(f"Invalid {what} record: {e}") from e


def dump_clade(clade: Clade) -> Dict[str, Any]:
    return _dump(clade_record(clade))


def load_clade(data: Any) -> Clade:
    return clade_from_record(_validate(CladeRecord, data, "clade"))


def dump_signature(signature: Signature) -> List[Dict[str, Any]]:
    return [_dump(slot) for slot in signature_record(signature)]


def load_signature(data: Any) -> Signature:
    if not isinstance(data, list):
        raise InterchangeError(f"Invalid signature record: expected a list, got {type(data).__name__}")
    return signature_from_record([_validate(SlotRecord, slot, "signature slot") for slot in data])


def dump_guard(guard: Guard) -> Dict[str, Any]:
    return _dump(guard_record(guard))


def load_guard(data: Any) -> Guard:
    return guard_from_record(_validate(GuardRecord, data, "guard"))


def dump_transition(transition: Transition) -> Dict[str, Any]:
    return _dump(transition_record(transition))


def load_transition(data: Any) -> Transition:
    return transition_from_record(_validate(TransitionRecord, data, "transition"))


def to_json(transition: Transition) -> str:
    return transition_record(transition).model_dump_json(by_alias=True, exclude_none=True)


def from_json(text: str) -> Transition:
    try:
        record = TransitionRecord.model_validate_json(text)
    except ValidationError as e:
        logger.debug(f"Rejected transition JSON: {e}")
        raise InterchangeError(f"Invalid transition record: {e}") from e
    return transition_from_record(record)
