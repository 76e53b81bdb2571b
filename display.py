# display.py
"""
Вывод в терминал: чётные значения белым, нечётные жёлтым, затем сводка.
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from sequence_stats import Parity, StatisticsRecord

PARITY_COLORS = {
    Parity.EVEN: Fore.WHITE,
    Parity.ODD: Fore.YELLOW,
}


def render_value(value: int, parity: Parity) -> str:
    return f"{PARITY_COLORS[parity]}{value}{Style.RESET_ALL}"


def make_echo(out: Optional[TextIO] = None):
    """Колбэк для collect(): печатает значения через пробел, как они идут в файле."""

    def echo(value: int, parity: Parity) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(render_value(value, parity) + " ")

    return echo


def print_summary(text: str, start: int, record: StatisticsRecord, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    print(file=out)
    print(f"Input: {text.strip()}", file=out)
    print(f"Parsed input: {start}", file=out)
    print(file=out)
    print(f"stopping time: {record.stopping_time}", file=out)
    print(f"even (white): {record.even_count}", file=out)
    print(f"odd (yellow): {record.odd_count}", file=out)
    print(f"max pos: {record.max_position}", file=out)
    print(f"max value: {record.max_value}", file=out)
    if record.skipped:
        print(f"{Fore.YELLOW}skipped lines: {record.skipped}{Style.RESET_ALL}", file=out)
    print(f"sha256: {record.digest}", file=out)
    print(file=out)
