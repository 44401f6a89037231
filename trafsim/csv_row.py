"""Splitting comma-separated map rows."""

from __future__ import annotations

from typing import Iterable, Iterator


def parse_row(line: str) -> list[str]:
    """Split one line on commas; a trailing comma yields a final empty cell."""
    return line.split(",")


def read_rows(stream: Iterable[str]) -> Iterator[list[str]]:
    """Yield the cells of each line of `stream`, without its line break."""
    for line in stream:
        yield parse_row(line[:-1] if line.endswith("\n") else line)