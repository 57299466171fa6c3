"""Turn typed text into a set of lowercase words."""

from __future__ import annotations

import sys
from typing import Optional, Set, TextIO


def tokenize(raw_text: str) -> Set[str]:
    lines = (line.strip().lower() for line in raw_text.splitlines())
    joined = " ".join(line for line in lines if line)
    # Blank input gives an empty set, never {""}.
    return set(joined.split())


def read_input(stream: TextIO) -> Optional[str]:
    """Read lines until a blank line or end of input.

    Returns ``None`` when the stream is already exhausted.
    """
    lines = []
    saw_line = False
    for line in iter(stream.readline, ""):
        saw_line = True
        if not line.strip():
            break
        lines.append(line.rstrip("\r\n"))
    if not saw_line:
        return None
    return "\n".join(lines)


class InputReader:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        prompt: str = "> ",
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._prompt = prompt

    def get_input(self) -> Optional[Set[str]]:
        self._output.write(self._prompt + "\n")
        self._output.flush()
        text = read_input(self._stream)
        if text is None:
            return None
        return tokenize(text)
