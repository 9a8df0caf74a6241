"""
Core Models Package

Data models shared by the markup pipeline and the quiz engine.

| Model | Mutability | Role |
|-------|------------|------|
| `Element` / `ElementPart` | mutable | Parsed cribsheet tree |
| `CompoundTerm` | frozen | One masked term split into words |
| `MaskedTermGroup` | mutable | Terms answerable in any order |
| `MaskedTermList` | mutable | Groups answered in order |
"""

from .elements import Element, ElementPart, Tag
from .terms import CompoundTerm, MaskedTermGroup, MaskedTermList

__all__ = [
    "Element",
    "ElementPart",
    "Tag",
    "CompoundTerm",
    "MaskedTermGroup",
    "MaskedTermList",
]
