#!/usr/bin/env python3
"""
Lichen - Transitions

A Transition ties the signatures a transition consumes (``input``, keyed by
place identifier) and produces (``output``) to a guard over the consumed
slots.

Transitions are configuration data. Construction never fails on a guard that
does not fit its input: the guard is replaced with the unconstrained
``EMPTY`` guard and a warning naming the transition is logged and kept on
``Transition.diagnostics``.

Guards address input slots by symbol. A guard key resolves when some input
signature has a slot with that symbol.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Set, Tuple

from .guard import EMPTY, Binding, Empty, Guard
from .signature import Signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """
    Validated transition between places.

    Construction applies the guard validation rules, whether through the
    constructor or Transition.create(). Input and output maps are copied into
    read-only mappings.

    Attributes:
        name: Display name
        input: Consumed signature per input place identifier (read-only)
        output: Produced signature per output place identifier (read-only)
        guard: Guard over the input slot symbols
        id: Unique transition identifier, generated when not given
        diagnostics: Warnings raised while validating the configuration
    """
    name: str
    input: Optional[Mapping[str, Signature]] = None
    output: Optional[Mapping[str, Signature]] = None
    guard: Optional[Guard] = None
    id: Optional[uuid.UUID] = None
    diagnostics: Tuple[str, ...] = field(default=(), init=False)

    def __post_init__(self):
        diagnostics: List[str] = []
        final_guard: Guard = EMPTY

        match (self.input, self.guard):
            case (None, None):
                pass
            case (_, None):
                pass
            case (None, Empty()):
                pass
            case (None, _):
                diagnostics.append(
                    f"Transition {self.name} has a guard but no input signatures. Using an empty guard."
                )
            case _:
                unresolved = _unresolved_keys(self.guard, self.input)
                if unresolved:
                    diagnostics.append(
                        f"Transition {self.name} has guard keys not present in the input signatures: "
                        f"{', '.join(unresolved)}. Using an empty guard."
                    )
                else:
                    final_guard = self.guard

        for message in diagnostics:
            logger.warning(message)

        object.__setattr__(self, 'id', self.id if self.id is not None else uuid.uuid4())
        object.__setattr__(self, 'input', MappingProxyType(dict(self.input or {})))
        object.__setattr__(self, 'output', MappingProxyType(dict(self.output or {})))
        object.__setattr__(self, 'guard', final_guard)
        object.__setattr__(self, 'diagnostics', tuple(diagnostics))

    @classmethod
    def create(
        cls,
        name: str,
        input: Optional[Mapping[str, Signature]] = None,
        output: Optional[Mapping[str, Signature]] = None,
        guard: Optional[Guard] = None,
        id: Optional[uuid.UUID] = None,
    ) -> "Transition":
        """
        Build a transition, degrading an unusable guard to EMPTY.

        Args:
            name: Transition name, used in diagnostics
            input: Signature consumed from each input place
            output: Signature produced into each output place (not checked)
            guard: Guard over input slot symbols
            id: Identifier to reuse, e.g. when loading a stored transition

        Returns:
            A Transition whose guard only references resolvable symbols
        """
        return cls(name, input=input, output=output, guard=guard, id=id)

    def input_domain(self) -> Set[str]:
        """Slot symbols a guard on this transition may reference"""
        return _domain(self.input)

    def admits(self, binding: Binding) -> bool:
        """Evaluate the guard against a binding of slot symbols to clades"""
        return self.guard.evaluate(binding)

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return (
            f"Transition({self.name!r}, inputs={list(self.input)}, "
            f"outputs={list(self.output)}, guard={self.guard!r})"
        )


def _domain(signatures: Mapping[str, Signature]) -> Set[str]:
    return {
        symbol
        for signature in signatures.values()
        for symbol in signature.bound_symbols()
    }


def _unresolved_keys(guard: Guard, signatures: Mapping[str, Signature]) -> List[str]:
    """Guard keys with no matching input slot, first occurrence order"""
    domain = _domain(signatures)
    unresolved = []
    for key in guard.keys():
        if key not in domain and key not in unresolved:
            unresolved.append(key)
    return unresolved
