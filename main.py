import argparse
import logging
from typing import Callable, List, Optional, Tuple

from colorama import just_fix_windows_console

from display import make_echo, print_summary
from expression import InvalidInput, parse
from report import build_report, save_report, sign_report
from sequence_stats import Parity, StatisticsRecord, collect
from sequence_store import open_sequence, write_sequence
from settings import Settings, load_settings

INVALID_INPUT_MESSAGE = (
    "Invalid input. Please enter a valid positive integer "
    "or a valid expression like '2^199' or '2^199-1'."
)

logger = logging.getLogger("collatz")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def read_input() -> str:
    print("Enter a positive integer as start value for the Collatz sequence (e.g., 27 or 2^199-1 or 2^199):")
    print()
    try:
        return input()
    except EOFError:
        return ""


def run(
    text: str,
    output_path: str,
    echo: Optional[Callable[[int, Parity], None]] = None,
    max_steps: Optional[int] = None,
    max_digits: int = 0,
) -> Tuple[int, StatisticsRecord]:
    """
    Весь конвейер без терминала: разбор → запись файла → чтение и статистика.
    InvalidInput (в том числе длиннее max_digits цифр) вылетает до создания файла.
    """
    start = parse(text, max_digits=max_digits)
    count = write_sequence(start, output_path, max_steps=max_steps)
    logger.debug("start=%s: %d values in %s", text.strip(), count, output_path)

    with open_sequence(output_path) as lines:
        record = collect(lines, on_value=echo)
    return start, record


def finish_report(text: str, start: int, record: StatisticsRecord, cfg: Settings) -> Optional[dict]:
    if not cfg.report_path:
        return None
    report = build_report(text, start, record)
    if cfg.signing_key:
        report = sign_report(report, cfg.signing_key)
    save_report(report, cfg.report_path)
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute a Collatz sequence, store it and print statistics.",
    )
    parser.add_argument("expression", nargs="?", help="start value, e.g. 27, 2^199 or 2^199-1")
    parser.add_argument("--output", help="sequence file (COLLATZ_OUTPUT_PATH)")
    parser.add_argument("--report", help="save JSON report here (COLLATZ_REPORT_PATH)")
    parser.add_argument("--quiet", action="store_true", help="do not echo the sequence")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_settings()
    if args.output:
        cfg.output_path = args.output
    if args.report:
        cfg.report_path = args.report
    if args.quiet:
        cfg.echo = False

    configure_logging(cfg.debug)
    just_fix_windows_console()

    text = args.expression if args.expression is not None else read_input()

    echo = make_echo() if cfg.echo else None
    try:
        start, record = run(text, cfg.output_path, echo=echo, max_digits=cfg.max_digits)
    except InvalidInput as exc:
        logger.debug("rejected input %r: %s", text, exc)
        print(INVALID_INPUT_MESSAGE)
        return 1

    if echo is not None:
        print()
    print_summary(text, start, record)
    finish_report(text, start, record, cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
