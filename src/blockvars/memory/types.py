"""Strict-type category validator."""

from __future__ import annotations


class StrictTypeValidator:
    """Category validator backed by a fixed set of strict type names."""

    def __init__(self, types: set[str] | frozenset[str]) -> None:
        self._types = frozenset(types)

    def is_recognized_category(self, name: str) -> bool:
        return name in self._types
