"""A line-oriented text buffer that can be opened from and saved to files."""

from __future__ import annotations

from typing import Optional


class UnsavedChangesError(RuntimeError):
    """Raised when an action would discard edits that have not been saved."""


class Notepad:
    """Holds lines of text, the file they belong to, and whether they changed.

    Ordinary failures such as a file that cannot be read or written, or an empty
    line, are reported by a ``False`` return value. Misuse raises an exception.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._current_file: Optional[str] = None
        self._modified = False

    @property
    def lines(self) -> tuple[str, ...]:
        """The text, one entry per line."""
        return tuple(self._lines)

    @property
    def is_modified(self) -> bool:
        """Whether the text has changed since it was last opened or saved."""
        return self._modified

    @property
    def current_file(self) -> Optional[str]:
        """The file the text is saved to, or ``None`` if it has none yet."""
        return self._current_file

    def new_file(self) -> None:
        """Start an empty, unnamed text.

        Raises UnsavedChangesError if there are unsaved edits.
        """
        if self._modified:
            raise UnsavedChangesError(
                "There are unsaved changes; save or discard them before creating a new file."
            )
        self._lines.clear()
        self._current_file = None

    def edit(self, text: str) -> bool:
        """Append ``text`` as a new line; an empty string is rejected with ``False``."""
        if not text:
            return False
        self._lines.append(text)
        self._modified = True
        return True

    def save(self) -> bool:
        """Write the text to the current file.

        Returns ``False`` if there is no current file or it cannot be written.
        """
        if not self._current_file:
            return False
        try:
            with open(self._current_file, "w", encoding="utf-8", newline="") as out:
                out.writelines(f"{line}\n" for line in self._lines)
        except OSError:
            return False
        self._modified = False
        return True

    def save_as(self, file_name: str) -> bool:
        """Make ``file_name`` the current file and save to it.

        Raises ValueError for an empty name; returns ``False`` if writing fails.
        """
        if not file_name:
            raise ValueError("File name must not be empty.")
        self._current_file = file_name
        return self.save()

    def open(self, file_name: str) -> bool:
        """Replace the text with the lines of ``file_name``.

        Returns ``False``, leaving everything unchanged, if it cannot be read.
        """
        try:
            with open(file_name, encoding="utf-8", newline="") as source:
                content = source.read()
        except (OSError, UnicodeDecodeError):
            return False
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines = lines
        self._current_file = file_name
        self._modified = False
        return True