# sequence_stats.py
"""
Статистика по сохранённой последовательности Коллатца.

Один проход по строкам, ничего не держим в памяти, кроме счётчиков:
- stopping_time: номер последней успешно разобранной строки
- even_count / odd_count: чётные и нечётные значения
- max_value / max_position: максимум и номер строки, где он встретился ВПЕРВЫЕ
- skipped: битые строки (предупреждение в лог, проход продолжается)
- digest: sha256 принятых строк
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional

from expression import LineParseError, parse_positive

logger = logging.getLogger("collatz.stats")


class Parity(Enum):
    EVEN = "even"
    ODD = "odd"


def classify(value: int) -> Parity:
    return Parity.EVEN if value % 2 == 0 else Parity.ODD


@dataclass(frozen=True)
class StatisticsRecord:
    stopping_time: int = 0
    even_count: int = 0
    odd_count: int = 0
    max_value: int = 0
    max_position: int = 0
    skipped: int = 0
    digest: str = ""

    def observe(self, line_no: int, value: int) -> StatisticsRecord:
        """Следующее состояние свёртки после успешно разобранной строки line_no."""
        parity = classify(value)
        record = replace(
            self,
            stopping_time=line_no,
            even_count=self.even_count + (parity is Parity.EVEN),
            odd_count=self.odd_count + (parity is Parity.ODD),
        )
        # строго больше: при равенстве остаётся первая позиция
        if value > self.max_value:
            record = replace(record, max_value=value, max_position=line_no)
        return record

    def skip(self) -> StatisticsRecord:
        return replace(self, skipped=self.skipped + 1)

    def to_dict(self) -> dict:
        # большие числа строкой: JSON-парсеры не обязаны держать bigint
        return {
            "stopping_time": self.stopping_time,
            "even_count": self.even_count,
            "odd_count": self.odd_count,
            "max_value": str(self.max_value),
            "max_position": self.max_position,
            "skipped": self.skipped,
            "digest": self.digest,
        }


def collect(
    lines: Iterable[str],
    on_value: Optional[Callable[[int, Parity], None]] = None,
    on_warning: Optional[Callable[[int, str], None]] = None,
) -> StatisticsRecord:
    """
    Сворачивает последовательность строк в StatisticsRecord.
    Битая строка не прерывает проход: пишем "Error parsing line <n>: <reason>" и идём дальше.
    """
    record = StatisticsRecord()
    hasher = hashlib.sha256()

    for line_no, line in enumerate(lines, start=1):
        try:
            value = parse_positive(line)
        except LineParseError as exc:
            logger.warning("Error parsing line %d: %s", line_no, exc)
            if on_warning is not None:
                on_warning(line_no, str(exc))
            record = record.skip()
            continue

        record = record.observe(line_no, value)
        hasher.update(f"{value}\n".encode())
        if on_value is not None:
            on_value(value, classify(value))

    return replace(record, digest=hasher.hexdigest())
