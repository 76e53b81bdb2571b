# collatz.py
import sys
from typing import Iterator, Optional

# значения орбиты пишутся в файл строкой, длина в цифрах не ограничена
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def collatz_step(n: int) -> int:
    """
    Выполняет ОДИН шаг преобразования Коллатца.

    Для чётных чисел: возвращает n // 2
    Для нечётных:      возвращает 3n + 1
    """
    if n <= 0:
        raise ValueError("n должно быть положительным")
    if n % 2 == 0:
        return n // 2
    else:
        return 3 * n + 1


def iter_sequence(start: int, max_steps: Optional[int] = None) -> Iterator[int]:
    """
    Лениво выдаёт орбиту числа start до 1 включительно.
    Сам start НЕ выдаётся: start=6 → 3, 10, 5, 16, 8, 4, 2, 1.

    max_steps — необязательная защита от зависания. По умолчанию лимита нет:
    гипотеза Коллатца не даёт оценки длины орбиты заранее.
    """
    if start <= 0:
        raise ValueError("start должно быть положительным")

    current = start
    steps = 0
    while current != 1:
        if max_steps is not None and steps >= max_steps:
            raise RuntimeError(f"Превышен лимит {max_steps} шагов для числа {start}")
        current = collatz_step(current)
        steps += 1
        yield current


def generate(start: int, sink, max_steps: Optional[int] = None) -> int:
    """
    Пишет последовательность в sink (любой объект с .append: list, SequenceWriter).
    Возвращает количество записанных значений.
    """
    count = 0
    for value in iter_sequence(start, max_steps=max_steps):
        sink.append(value)
        count += 1
    return count
