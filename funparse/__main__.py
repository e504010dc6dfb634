import argparse
import logging
import sys

from funparse.config import EvaluatorConfig
from funparse.errors import InvalidExpression
from funparse.evaluator import evaluate, parse
from funparse.reference import evaluate_reference

logger = logging.getLogger(__name__)


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_arg_parser():
    arg_parser = argparse.ArgumentParser(
        prog="funparse", description="Evaluate integer arithmetic expressions."
    )
    arg_parser.add_argument("expressions", nargs="*", metavar="EXPR")
    arg_parser.add_argument("-f", "--file", help="read one expression per line from a file")
    arg_parser.add_argument(
        "--partial", action="store_true", help="accept trailing input and print what was left"
    )
    arg_parser.add_argument(
        "--check",
        action="store_true",
        help="also evaluate with the lark reference grammar (the consumed prefix under --partial)",
    )
    arg_parser.add_argument(
        "--max-nesting", type=positive_int, default=EvaluatorConfig.max_nesting
    )
    arg_parser.add_argument("-v", "--verbose", action="store_true")
    return arg_parser


def run_one(expr, config, check):
    if config.require_full_input:
        value = evaluate(expr, config)
        consumed = expr.strip()
        print(f"Result: {value}")
    else:
        value, unparsed = parse(expr, config)
        stripped = expr.strip()
        consumed = stripped[: len(stripped) - len(unparsed)]
        print(f"Result: {value}")
        print(f"Unparsed: {unparsed}")

    if check:
        expected = evaluate_reference(consumed)
        if expected != value:
            logger.error("mismatch for %r: combinators %d, lark %d", consumed, value, expected)
            return False
    return True


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = EvaluatorConfig(require_full_input=not args.partial, max_nesting=args.max_nesting)

    expressions = list(args.expressions)
    if args.file:
        with open(args.file, "r") as file:
            expressions.extend(line for line in file.read().splitlines() if line.strip())
    if not expressions:
        expressions.append(input("Enter an arithmetic expression: "))

    ok = True
    for expr in expressions:
        try:
            ok = run_one(expr, config, args.check) and ok
        except InvalidExpression as e:
            print(f"Error: {e}", file=sys.stderr)
            ok = False
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
