from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ParsingResult(Generic[T]):
    parsed: T
    unparsed: str

    # Lets callers write `for value, rest in parser(text)`
    def __iter__(self):
        yield self.parsed
        yield self.unparsed

    def __repr__(self):
        return f"(parsed={self.parsed!r}, unparsed={self.unparsed!r})"


class Parser(Generic[T]):
    """A parser is a function from a string to a list of (thing, rest) pairs.

    An empty list means the input could not be parsed; more than one entry
    means the input is ambiguous. Parsers never raise on bad input and never
    keep state between calls.
    """

    __slots__ = ("func", "name")

    def __init__(self, func: Callable[[str], List[ParsingResult[T]]], name=None):
        self.func = func
        self.name = name or getattr(func, "__name__", "parser")

    def __call__(self, text: str) -> List[ParsingResult[T]]:
        return self.func(text)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"

    def __or__(self, other):
        from funparse.combinators import either

        return either(self, other)

    def __add__(self, other):
        return self.then(other)

    def map(self, function: Callable[[T], U]) -> "Parser[U]":
        from funparse.combinators import map_parser

        return map_parser(self, function)

    def then(self, other):
        from funparse.combinators import then

        return then(self, other)


def parser(func):
    """Decorator turning a plain `str -> list` function into a Parser."""
    return Parser(func)
