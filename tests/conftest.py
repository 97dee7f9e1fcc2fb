"""Pytest configuration for lichen tests"""

from dataclasses import dataclass

import pytest

from lichen import Clade


@dataclass
class Taxonomy:
    """
    root
    ├── child
    │   ├── grandchild1
    │   └── grandchild2
    └── other
        └── cousin
    """
    root: Clade
    child: Clade
    grandchild1: Clade
    grandchild2: Clade
    other: Clade
    cousin: Clade


@pytest.fixture
def tax():
    grandchild1 = Clade.new("grandchild1")
    grandchild2 = Clade.new("grandchild2")
    child = Clade.new("child", [grandchild1, grandchild2])
    cousin = Clade.new("cousin")
    other = Clade.new("other", [cousin])
    root = Clade.new("root", [child, other])
    return Taxonomy(root, child, grandchild1, grandchild2, other, cousin)
