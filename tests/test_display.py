"""Tests for the colored terminal output."""

from __future__ import annotations

import io

from colorama import Fore, Style

from display import make_echo, print_summary, render_value
from sequence_stats import Parity, collect


def test_render_value_colors_by_parity() -> None:
    assert render_value(4, Parity.EVEN) == f"{Fore.WHITE}4{Style.RESET_ALL}"
    assert render_value(5, Parity.ODD) == f"{Fore.YELLOW}5{Style.RESET_ALL}"


def test_echo_writes_space_separated_values() -> None:
    out = io.StringIO()
    echo = make_echo(out)

    echo(10, Parity.EVEN)
    echo(5, Parity.ODD)

    assert out.getvalue() == render_value(10, Parity.EVEN) + " " + render_value(5, Parity.ODD) + " "


def test_print_summary_lists_statistics() -> None:
    out = io.StringIO()
    record = collect(["3", "10", "5", "16", "8", "4", "2", "1"])

    print_summary("6\n", 6, record, out=out)

    text = out.getvalue()
    assert "Input: 6\n" in text
    assert "Parsed input: 6" in text
    assert "stopping time: 8" in text
    assert "even (white): 5" in text
    assert "odd (yellow): 3" in text
    assert "max pos: 4" in text
    assert "max value: 16" in text
    assert "skipped lines" not in text


def test_print_summary_mentions_skipped_lines() -> None:
    out = io.StringIO()

    print_summary("x", 1, collect(["1", "bad"]), out=out)

    assert "skipped lines: 1" in out.getvalue()
