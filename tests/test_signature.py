#!/usr/bin/env python3
"""
Tests for signatures and their product order.

Run with: pytest tests/test_signature.py -v
"""

import pytest

from lichen import Clade, Relation, Signature, SignatureError, compare_signatures


class TestConstruction:

    def test_of_keeps_slot_order(self, tax):
        sig = Signature.of(tax.child, tax.grandchild2)
        assert sig.clades == (tax.child, tax.grandchild2)
        assert sig.symbols == (None, None)
        assert len(sig) == 2
        assert sig[1] == tax.grandchild2

    def test_named_slots(self, tax):
        sig = Signature.named({"a": tax.child, "b": tax.cousin})
        assert sig.slots() == [("a", tax.child), ("b", tax.cousin)]
        assert sig.bound_symbols() == ["a", "b"]

    def test_list_input_is_copied(self, tax):
        clades = [tax.child]
        sig = Signature(clades)
        clades.append(tax.cousin)
        assert sig.clades == (tax.child,)

    def test_symbol_count_must_match(self, tax):
        with pytest.raises(SignatureError):
            Signature((tax.child, tax.cousin), ("only_one",))

    def test_duplicate_symbols_rejected(self, tax):
        with pytest.raises(SignatureError):
            Signature((tax.child, tax.cousin), ("x", "x"))

    def test_partially_named(self, tax):
        sig = Signature((tax.child, tax.cousin), (None, "c"))
        assert sig.bound_symbols() == ["c"]

    def test_symbols_do_not_affect_equality(self, tax):
        plain = Signature.of(tax.child)
        named = Signature.named({"x": tax.child})
        assert plain == named
        assert hash(plain) == hash(named)


class TestOrder:

    def test_equal(self, tax):
        a = Signature.of(tax.grandchild1, tax.grandchild2)
        b = Signature.of(tax.grandchild1, tax.grandchild2)
        assert compare_signatures(a, b) is Relation.EQUAL
        assert a == b
        assert a <= b and a >= b

    def test_ancestor_slot_with_equal_slot_is_greater(self, tax):
        wide = Signature.of(tax.child, tax.grandchild2)
        narrow = Signature.of(tax.grandchild1, tax.grandchild2)
        assert compare_signatures(wide, narrow) is Relation.GREATER
        assert wide > narrow
        assert narrow < wide
        assert not wide < narrow

    def test_single_slot(self, tax):
        assert Signature.of(tax.child) > Signature.of(tax.grandchild1)
        assert not Signature.of(tax.child) < Signature.of(tax.grandchild1)

    def test_all_slots_greater(self, tax):
        a = Signature.of(tax.root, tax.child)
        b = Signature.of(tax.child, tax.grandchild1)
        assert compare_signatures(a, b) is Relation.GREATER

    def test_unequal_lengths_are_incomparable(self, tax):
        a = Signature.of(tax.child, tax.grandchild2)
        b = Signature.of(tax.child)
        assert compare_signatures(a, b) is Relation.INCOMPARABLE
        assert a != b
        assert not a >= b
        assert not a <= b

    def test_empty_signatures_are_equal(self):
        assert compare_signatures(Signature(), Signature()) is Relation.EQUAL

    def test_mixed_directions_are_incomparable(self, tax):
        a = Signature.of(tax.child, tax.grandchild1)
        b = Signature.of(tax.grandchild1, tax.child)
        assert compare_signatures(a, b) is Relation.INCOMPARABLE
        assert not a < b and not a > b

    def test_incomparable_slot_makes_signature_incomparable(self, tax):
        a = Signature.of(tax.root, tax.grandchild1)
        b = Signature.of(tax.child, tax.cousin)
        assert compare_signatures(a, b) is Relation.INCOMPARABLE


class TestAdmits:

    def test_each_candidate_fits_a_slot(self, tax):
        sig = Signature.of(tax.child, tax.grandchild2)
        assert sig.admits([tax.grandchild1, tax.grandchild2])

    def test_order_of_candidates_does_not_matter(self, tax):
        sig = Signature.of(tax.grandchild1, tax.grandchild2)
        assert sig.admits([tax.grandchild2, tax.grandchild1])

    def test_candidates_cannot_fill_two_slots(self, tax):
        sig = Signature.of(tax.grandchild1, tax.grandchild2)
        assert not sig.admits([tax.grandchild1, tax.grandchild1])

    def test_too_few_candidates(self, tax):
        assert not Signature.of(tax.grandchild1).admits([])

    def test_broader_candidate_does_not_fit(self, tax):
        assert not Signature.of(tax.grandchild1).admits([tax.child])

    def test_extra_candidates_allowed(self, tax):
        sig = Signature.of(tax.child)
        assert sig.admits([tax.child, tax.grandchild1, tax.cousin])

    def test_needs_reassignment(self, tax):
        # child would grab grandchild1 first, which grandchild1's slot needs
        sig = Signature.of(tax.child, tax.grandchild1)
        assert sig.admits([tax.grandchild1, tax.grandchild2])

    def test_unrelated_clade(self, tax):
        assert not Signature.of(tax.child).admits([Clade.new("stray")])
