# expression.py
"""
expression.py — разбор стартового значения для последовательности Коллатца.

Поддерживаются две формы:
- обычное десятичное число: "27"
- степенное выражение: "2^199", "2^199-1"  (base^exponent - subtract)

Все вычисления точные (int в Python не ограничен по размеру),
никаких float и промежуточных обрезаний.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

# Python 3.11+ не даёт str()/int() для чисел длиннее 4300 цифр, снимаем лимит
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

POWER_RE = re.compile(r"(\d+)\^(\d+)(?:-(\d+))?", re.ASCII)
DECIMAL_RE = re.compile(r"[+-]?\d+", re.ASCII)


class InvalidInput(ValueError):
    """Стартовое значение не число и не выражение вида base^exp[-sub], либо <= 0."""


class LineParseError(ValueError):
    """Строка сохранённой последовательности не является положительным целым."""


@dataclass(frozen=True)
class Expression:
    base: int
    exponent: int = 1
    subtract: int = 0

    def evaluate(self) -> int:
        return self.base ** self.exponent - self.subtract


def parse_positive(text: str) -> int:
    """
    Простое десятичное число > 0.
    Используется и для ввода, и для строк файла с последовательностью.
    """
    stripped = text.strip()
    if not DECIMAL_RE.fullmatch(stripped):
        raise LineParseError(f"not an integer: {stripped!r}")
    try:
        value = int(stripped)
    except ValueError as exc:
        # лимит цифр, выставленный снаружи через sys.set_int_max_str_digits()
        raise LineParseError(str(exc)) from None
    if value <= 0:
        raise LineParseError(f"value must be a positive integer, got {value}")
    return value


def parse_expression(text: str) -> Expression:
    """
    Разбирает текст в Expression, не вычисляя степень.
    Любая ошибка разбора → InvalidInput.
    """
    stripped = text.strip()

    m = POWER_RE.fullmatch(stripped)
    if m:
        try:
            base = int(m.group(1))
            exponent = int(m.group(2))
            subtract = int(m.group(3) or "0")
        except ValueError as exc:
            raise InvalidInput(f"bad number in expression {stripped!r}: {exc}") from None
        return Expression(base, exponent, subtract)

    if not DECIMAL_RE.fullmatch(stripped):
        raise InvalidInput(f"not a number or expression: {stripped!r}")
    try:
        return Expression(int(stripped))
    except ValueError as exc:
        raise InvalidInput(str(exc)) from None


def parse(text: str, max_digits: int = 0) -> int:
    """
    Стартовое значение как точное положительное целое.
    max_digits > 0 ограничивает длину числа в десятичных цифрах (0 = без лимита).
    """
    value = parse_expression(text).evaluate()
    if value <= 0:
        raise InvalidInput(f"start value must be positive, got {value}")
    if max_digits and len(str(value)) > max_digits:
        raise InvalidInput(f"start value has more than {max_digits} decimal digits")
    return value
