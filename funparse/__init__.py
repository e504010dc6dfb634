"""A small parser-combinator library and an integer arithmetic evaluator built on it.

A parser for things is a function from strings to lists of pairs of things and
strings: `digit("12")` gives `[(parsed=1, unparsed='2')]`, and an empty list
means no parse.
"""

from funparse.combinators import between, chainl, either, lazy, many, map_parser, optional, pair, plus, some, then, unit
from funparse.config import EvaluatorConfig
from funparse.core import Parser, ParsingResult, parser
from funparse.errors import ExpressionTooDeep, FunparseError, InvalidExpression, TrailingInput
from funparse.evaluator import evaluate, parse
from funparse.expression import expression, factor, term
from funparse.numeric import integer, natural
from funparse.primitives import char, digit, letter

__version__ = "0.1.0"

__all__ = [
    "EvaluatorConfig",
    "ExpressionTooDeep",
    "FunparseError",
    "InvalidExpression",
    "Parser",
    "ParsingResult",
    "TrailingInput",
    "between",
    "chainl",
    "char",
    "digit",
    "either",
    "evaluate",
    "expression",
    "factor",
    "integer",
    "lazy",
    "letter",
    "many",
    "map_parser",
    "natural",
    "optional",
    "pair",
    "parse",
    "parser",
    "plus",
    "some",
    "term",
    "then",
    "unit",
]
