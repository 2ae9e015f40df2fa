"""An interactive command-line front end for the notepad."""

from __future__ import annotations

import abc
import argparse
import sys
from typing import Optional, TextIO

from drillbox.notepad import Notepad


class NotepadInterface(abc.ABC):
    """A user interface that drives a notepad."""

    @abc.abstractmethod
    def run(self, notepad: Notepad) -> None:
        """Interact with the user until they are done with ``notepad``."""


class _TokenReader:
    """Reads whitespace-separated words, single characters and lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        if self._pos < len(self._buffer):
            return True
        if self._eof:
            return False
        line = self._stream.readline()
        if not line:
            self._eof = True
            return False
        self._buffer = line
        self._pos = 0
        return True

    def _skip_space(self) -> bool:
        while self._fill():
            if not self._buffer[self._pos].isspace():
                return True
            self._pos += 1
        return False

    def word(self) -> Optional[str]:
        if not self._skip_space():
            return None
        start = self._pos
        while self._pos < len(self._buffer) and not self._buffer[self._pos].isspace():
            self._pos += 1
        return self._buffer[start : self._pos]

    def char(self) -> Optional[str]:
        if not self._skip_space():
            return None
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch

    def ignore(self) -> None:
        if self._fill():
            self._pos += 1

    def line(self) -> Optional[str]:
        if not self._fill():
            return None
        end = self._buffer.find("\n", self._pos)
        if end == -1:
            text = self._buffer[self._pos :]
            self._pos = len(self._buffer)
        else:
            text = self._buffer[self._pos : end]
            self._pos = end + 1
        return text


class ConsoleInterface(NotepadInterface):
    """Runs the notepad as a prompt reading commands from a text stream."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self._reader = _TokenReader(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def run(self, notepad: Notepad) -> None:
        """Read and carry out commands until ``exit`` or the end of input."""
        reader = self._reader
        arg = ""

        self._write("Welcome to the Simple Notepad!\n")
        self._write(
            "Simple Notepad (commands: new, open <file>, edit <text>, save, "
            "saveas <file>, display, exit)\n"
        )

        while True:
            self._write("> ")
            command = reader.word()
            if command is None:
                self._write("\nExiting...\n")
                break

            try:
                if command == "new":
                    notepad.new_file()
                    self._write("New file created.\n")
                elif command == "open":
                    arg = reader.word() or arg
                    if notepad.open(arg):
                        self._write(f"File {arg} opened.\n")
                    else:
                        self._write("Failed to open file.\n")
                elif command == "edit":
                    reader.ignore()
                    text = reader.line()
                    if text is not None:
                        arg = text
                    notepad.edit(arg)
                    self._write("Line added.\n")
                elif command == "save":
                    if notepad.save():
                        self._write("File saved.\n")
                    else:
                        self._write("No filename specified. Use saveas.\n")
                elif command == "saveas":
                    arg = reader.word() or arg
                    if notepad.save_as(arg):
                        self._write(f"File saved as {arg}.\n")
                    else:
                        self._write("Failed to save file.\n")
                elif command == "display":
                    lines = notepad.lines
                    if not lines:
                        # Displaying an empty text opens a fresh session first.
                        self.run(Notepad())
                        self._write("(Empty file)\n")
                        return
                    for number, line in enumerate(lines, start=1):
                        self._write(f"{number}: {line}\n")
                elif command == "exit":
                    if notepad.is_modified:
                        self._write("Save changes before exiting? (y/n): ")
                        choice = reader.char()
                        if choice in ("y", "Y"):
                            if not notepad.save():
                                self._write("Enter filename: ")
                                arg = reader.word() or arg
                                notepad.save_as(arg)
                        else:
                            self._write("Exiting without saving.\n")
                    break
                else:
                    self._write("Unknown command.\n")
            except Exception as exc:
                self._err.write(f"Error: {exc}\n")
                self._err.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Start an interactive notepad session on standard input and output."""
    parser = argparse.ArgumentParser(description="A simple command-line notepad.")
    parser.parse_args(argv)
    ConsoleInterface().run(Notepad())
    return 0