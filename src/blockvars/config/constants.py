"""Configuration constants.

Values here are part of the variable model itself and are NOT user-configurable.
For configurable values, see models.py.
"""

DEFAULT_CATEGORY = "Default"
"""Untyped fallback category; always accepted as a category filter."""

VARIABLE_FIELD = "VAR"
"""Field holding the variable name on single-variable node kinds."""

DEFAULT_GETTER_KIND = "variables_get"
DEFAULT_SETTER_KIND = "variables_set"

DEFAULT_NAME_ALPHABET = "ijkmnopqrstuvwxyz"
"""Candidate letters for generated names, in preference order ('l' is skipped)."""

BASE_NAME_PATTERN = r"^(\D*)(\d+)$"
"""Splits a base name into a digit-free stem and its trailing number."""
