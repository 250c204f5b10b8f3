import argparse
import logging
import sys
from pathlib import Path

from lambdalab.adapters.console import StdoutConsole
from lambdalab.components.demo import DemoInput, run_demo
from lambdalab.components.first_match import FindFirstInput, run_find
from lambdalab.domain.functions import (
    Predicate,
    greater_than,
    is_even,
    multiply_by,
)
from lambdalab.rules.loader import default_rules, load_rules
from lambdalab.rules.models import LOG_LEVELS, Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: Path) -> Rules:
    if not path.exists():
        logger.info(f"Rules file {path} not found, using defaults.")
        return default_rules()
    return load_rules(path)


def handle_find(args: argparse.Namespace, console: StdoutConsole) -> int:
    predicates: list[Predicate] = []
    if args.even:
        predicates.append(is_even)
    predicates.extend(greater_than(t) for t in args.gt)

    output = run_find(
        FindFirstInput(
            sequence=tuple(args.numbers),
            predicates=tuple(predicates),
            transform=multiply_by(args.times),
        )
    )
    console.write("none" if output.value is None else output.value)
    return 0


def handle_demo(rules: Rules, console: StdoutConsole) -> int:
    demo = rules.demo
    output = run_demo(
        DemoInput(
            numbers=tuple(demo.numbers),
            threshold=demo.threshold,
            factor=demo.factor,
        ),
        console=console,
    )
    if not output.success:
        for error in output.errors:
            logger.error(error)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lambda Lab CLI")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the logging level from rules",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # find
    find_parser = subparsers.add_parser(
        "find", help="Transform the first number passing all predicates"
    )
    find_parser.add_argument("numbers", nargs="*", type=int, help="Numbers to scan")
    find_parser.add_argument("--even", action="store_true", help="Require even numbers")
    find_parser.add_argument(
        "--gt", type=int, action="append", default=[], help="Require number > N (repeatable)"
    )
    find_parser.add_argument("--times", type=int, default=1, help="Multiply the match by K")

    # demo
    demo_parser = subparsers.add_parser("demo", help="Run every demonstration style")
    demo_parser.add_argument("--rules", default=RULES_PATH, help="Path to rules file")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    rules_path = Path(getattr(args, "rules", RULES_PATH))
    try:
        rules = get_rules(rules_path)
    except ValueError as e:
        # find takes nothing from the rules file but the log level
        if args.command != "demo":
            logger.warning(f"Ignoring invalid rules file {rules_path}: {e}")
            rules = default_rules()
        else:
            logging.basicConfig(level=logging.ERROR)
            logger.error(str(e))
            return 1

    logging.basicConfig(level=args.log_level or rules.logging.level)

    console = StdoutConsole()
    if args.command == "find":
        return handle_find(args, console)
    return handle_demo(rules, console)


if __name__ == "__main__":
    sys.exit(main())
