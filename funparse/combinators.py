import logging
from typing import Callable, List, TypeVar

from funparse.core import Parser, ParsingResult

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


def some(parser: Parser[T]) -> Parser[List[T]]:
    """One or more repetitions of `parser`, as long as it keeps matching.

    Repetition is greedy and takes the first result of `parser` at each step,
    so an ambiguous `parser` is not explored further. A step that does not
    consume anything ends the repetition.
    """

    def _some(text):
        items = []
        rest = text
        while True:
            results = parser(rest)
            if not results or len(results[0].unparsed) >= len(rest):
                break
            items.append(results[0].parsed)
            rest = results[0].unparsed
        if not items:
            return []
        return [ParsingResult(items, rest)]

    return Parser(_some, name=f"some({parser.name})")


def either(first: Parser[T], second: Parser[T]) -> Parser[T]:
    """First-match alternation: `second` only runs when `first` has no results."""

    def _either(text):
        return first(text) or second(text)

    return Parser(_either, name=f"{first.name} | {second.name}")


def map_parser(parser: Parser[T], function: Callable[[T], U]) -> Parser[U]:
    def _map(text):
        return [ParsingResult(function(parsed), rest) for parsed, rest in parser(text)]

    return Parser(_map, name=f"map({parser.name})")


def _sequence(first, second, combine, name):
    def _seq(text):
        results = []
        for left, intermediate in first(text):
            for right, rest in second(intermediate):
                results.append(ParsingResult(combine(left, right), rest))
        return results

    return Parser(_seq, name=name)


def _append_or_pair(left, right):
    if isinstance(left, list):
        return left + [right]
    return [left, right]


def then(first, second):
    """Run `first`, then `second` on whatever `first` left unparsed.

    Every branch of `first` is combined with every branch of `second`. The
    values are returned as a list: `[a, b]` for two plain values, and when
    `first` produces a list, `second`'s value is appended to it so that
    `a + b + c` gives `[a, b, c]` and `some(digit) + letter` gives
    `[1, 2, 'a']`. Use `pair` to keep a list-valued left side nested.
    """
    return _sequence(first, second, _append_or_pair, f"{first.name} + {second.name}")


plus = then


def pair(first, second):
    """Like `then`, but always yields `[a, b]`, whatever `a` is."""
    return _sequence(first, second, lambda left, right: [left, right], f"pair({first.name}, {second.name})")


def unit(value):
    def _unit(text):
        return [ParsingResult(value, text)]

    return Parser(_unit, name=f"unit({value!r})")


def many(parser):
    return either(some(parser), unit([]))


def optional(parser, default=None):
    return either(parser, unit(default))


def between(open_, body, close):
    def _between(text):
        results = []
        for _, after_open in open_(text):
            for value, after_body in body(after_open):
                for _, rest in close(after_body):
                    results.append(ParsingResult(value, rest))
        return results

    return Parser(_between, name=f"between({body.name})")


def chainl(operand, operator):
    """Parse `operand (operator operand)*`, folding left to right as it goes.

    `operator` must produce a binary function. Like `some`, the repetition is
    greedy and commits to the first match at each step. If applying an
    operator raises ArithmeticError (e.g. division by zero) that branch is
    dropped.
    """

    step = pair(operator, operand)

    def _chainl(text):
        results = []
        for acc, rest in operand(text):
            try:
                while True:
                    steps = step(rest)
                    if not steps:
                        break
                    (function, right), rest = steps[0]
                    acc = function(acc, right)
            except ArithmeticError as e:
                logger.debug("dropping branch at %r: %s", rest, e)
                continue
            results.append(ParsingResult(acc, rest))
        return results

    return Parser(_chainl, name=f"chainl({operand.name})")


def lazy(thunk):
    """Defer building a parser until first use, for mutually recursive rules."""
    cache = []

    def _lazy(text):
        if not cache:
            cache.append(thunk())
        return cache[0](text)

    return Parser(_lazy, name="lazy")
