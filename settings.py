"""
Настройки из окружения, чтобы main и тесты использовали единообразно.
"""

import os
from dataclasses import dataclass
from typing import Optional

from sequence_store import DEFAULT_SEQUENCE_PATH


@dataclass
class Settings:
    output_path: str = DEFAULT_SEQUENCE_PATH
    report_path: Optional[str] = None
    signing_key: Optional[str] = None
    max_digits: int = 0  # лимит длины стартового числа, 0 = без лимита
    echo: bool = True
    debug: bool = False


def _flag(value: str) -> bool:
    return value in ("1", "true", "True")


def load_settings() -> Settings:
    cfg = Settings(
        output_path=os.environ.get("COLLATZ_OUTPUT_PATH", DEFAULT_SEQUENCE_PATH),
        report_path=os.environ.get("COLLATZ_REPORT_PATH") or None,
        signing_key=os.environ.get("COLLATZ_SIGNING_KEY") or None,
        echo=_flag(os.environ.get("COLLATZ_ECHO", "1")),
        debug=_flag(os.environ.get("DEBUG", "0")),
    )
    digits = os.environ.get("COLLATZ_MAX_DIGITS")
    if digits:
        try:
            cfg.max_digits = max(0, int(digits))
        except ValueError:
            pass
    return cfg
