"""Fresh variable names that do not collide with the current namespace."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import count
from typing import TYPE_CHECKING

from blockvars.config.constants import BASE_NAME_PATTERN, DEFAULT_NAME_ALPHABET
from blockvars.core.errors import NamingError
from blockvars.core.logging import get_logger

if TYPE_CHECKING:
    from blockvars.context import RegistryContext
    from blockvars.variables.names import CaseInsensitiveNameSet, NameIndex

log = get_logger("variables.generator")

_BASE_NAME_RE = re.compile(BASE_NAME_PATTERN)


def split_base_name(base: str) -> tuple[str, int]:
    """Split ``counter7`` into ``("counter", 8)``: the stem and first number to try.

    Names that don't end in digits, or that carry digits before the trailing
    number, keep the whole name as the stem and start at 1.
    """
    match = _BASE_NAME_RE.match(base)
    if match:
        return match.group(1), int(match.group(2)) + 1
    return base, 1


def alphabet_candidates() -> Iterator[str]:
    """i, j, k, m, ..., z, then i1 ... z1, i2 ... z2, and so on."""
    for tier in count():
        suffix = str(tier) if tier else ""
        for letter in DEFAULT_NAME_ALPHABET:
            yield letter + suffix


def numbered_candidates(stem: str, start: int) -> Iterator[str]:
    for n in count(start):
        yield f"{stem}{n}"


class UniqueNameGenerator:
    """Picks names absent (case-insensitively) from the whole default workspace."""

    def __init__(self, context: RegistryContext, names: NameIndex) -> None:
        self._context = context
        self._names = names

    def generate(self, base: str | None = None) -> str:
        """Unique name derived from base, or from the default alphabet if base is empty."""
        if base:
            return self.from_base(base)
        return self.from_default_alphabet()

    def from_base(self, base: str) -> str:
        """base itself if unused, else base's stem with the next free number.

        ``counter1`` with ``counter1`` and ``counter2`` taken gives ``counter3``.
        """
        in_use = self._names.collect()
        if base not in in_use:
            return base
        stem, start = split_base_name(base)
        name = self._first_free(numbered_candidates(stem, start), in_use, stem)
        log.debug("unique_name_from_base", base=base, name=name)
        return name

    def from_default_alphabet(self) -> str:
        """First free short name in the order i, j, k, m, ..., z, i1, j1, ..."""
        in_use = self._names.collect()
        if not in_use:
            return DEFAULT_NAME_ALPHABET[0]
        name = self._first_free(alphabet_candidates(), in_use, DEFAULT_NAME_ALPHABET)
        log.debug("unique_name_from_alphabet", name=name, in_use=len(in_use))
        return name

    def _first_free(
        self, candidates: Iterator[str], in_use: CaseInsensitiveNameSet, stem: str
    ) -> str:
        # A finite namespace always leaves a gap; the cap only guards against
        # pathological configurations.
        max_attempts = self._context.config.naming.max_attempts
        for attempt, candidate in enumerate(candidates, start=1):
            if candidate not in in_use:
                return candidate
            if attempt >= max_attempts:
                break
        raise NamingError.exhausted_search_space(stem, max_attempts)
