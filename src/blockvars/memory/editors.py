"""Live auxiliary-editor registry and an in-memory parameter editor."""

from __future__ import annotations

from collections.abc import Iterator

from blockvars.interfaces import AuxiliaryEditor
from blockvars.variables.names import names_equal


class EditorRegistry:
    """Every auxiliary editor instance currently alive in the process."""

    def __init__(self) -> None:
        self._editors: list[AuxiliaryEditor] = []

    def register(self, editor: AuxiliaryEditor) -> AuxiliaryEditor:
        if editor not in self._editors:
            self._editors.append(editor)
        return editor

    def unregister(self, editor: AuxiliaryEditor) -> None:
        if editor in self._editors:
            self._editors.remove(editor)

    def __iter__(self) -> Iterator[AuxiliaryEditor]:
        return iter(list(self._editors))

    def __len__(self) -> int:
        return len(self._editors)


class ParameterEditor:
    """Function editor holding its own copy of a parameter list."""

    def __init__(self, params: list[str] | None = None, *, opened: bool = False) -> None:
        self.params = list(params or [])
        self.refresh_count = 0
        self._open = opened

    def open(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def is_open(self) -> bool:
        return self._open

    def rename_parameter(self, old_name: str, new_name: str) -> None:
        self.params = [new_name if names_equal(p, old_name) else p for p in self.params]

    def remove_parameter(self, name: str) -> None:
        self.params = [p for p in self.params if not names_equal(p, name)]

    def refresh_params_everywhere(self) -> None:
        self.refresh_count += 1
