# activity_emissions/rules.py
"""Ordered keyword rules used to classify free-text activity labels.

Rules are evaluated top to bottom and the first hit wins, so overlapping
keywords ("electric car" vs "car") resolve by position in the list.
"""
from __future__ import annotations

from typing import Any, Iterable, NamedTuple, Optional, Tuple


class Rule(NamedTuple):
    keywords: Tuple[str, ...]
    outcome: Any
    excludes: Tuple[str, ...] = ()
    units: Tuple[str, ...] = ()

    def matches(self, text: str, unit: Optional[str] = None) -> bool:
        if unit is not None and unit in self.units:
            return True
        if any(ex in text for ex in self.excludes):
            return False
        return any(kw in text for kw in self.keywords)


def normalize_label(label: Optional[str]) -> str:
    return (label or "").lower()


def first_match(rules: Iterable[Rule], text: str, unit: Optional[str] = None) -> Optional[Rule]:
    for rule in rules:
        if rule.matches(text, unit):
            return rule
    return None
