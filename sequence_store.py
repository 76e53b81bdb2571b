# sequence_store.py
"""
Хранилище последовательности: одна десятичная строка на значение,
без заголовка, каждая строка заканчивается "\n".

Сначала файл пишется целиком и закрывается, только потом читается —
статистика всегда видит законченную последовательность.
"""

import logging
from contextlib import contextmanager
from typing import IO, Iterator, Optional

from collatz import generate

DEFAULT_SEQUENCE_PATH = "collatz_sequence.txt"

logger = logging.getLogger("collatz.store")


class SequenceWriter:
    """Append-only приёмник значений поверх текстового потока."""

    def __init__(self, stream: IO[str]):
        self._stream = stream
        self.count = 0

    @classmethod
    def open(cls, path: str = DEFAULT_SEQUENCE_PATH) -> "SequenceWriter":
        return cls(open(path, "w", encoding="utf-8"))

    def append(self, value: int) -> None:
        self._stream.write(f"{value}\n")
        self.count += 1

    def close(self) -> None:
        self._stream.flush()
        self._stream.close()

    def __enter__(self) -> "SequenceWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Строки потока по одной, без символов перевода строки."""
    for line in stream:
        yield line.rstrip("\r\n")


def write_sequence(start: int, path: str = DEFAULT_SEQUENCE_PATH, max_steps: Optional[int] = None) -> int:
    with SequenceWriter.open(path) as writer:
        generate(start, writer, max_steps=max_steps)
    logger.debug("sequence of %d values written to %s", writer.count, path)
    return writer.count


@contextmanager
def open_sequence(path: str = DEFAULT_SEQUENCE_PATH) -> Iterator[Iterator[str]]:
    with open(path, "r", encoding="utf-8") as f:
        yield read_lines(f)
