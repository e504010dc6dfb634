import logging

from lark import Lark, Transformer
from lark.exceptions import LarkError

from funparse.errors import InvalidExpression
from funparse.expression import OPERATORS

logger = logging.getLogger(__name__)

# The same arithmetic language as funparse.expression, written as a lark grammar.
# No whitespace is ignored, to match the combinator grammar.
grammar = r"""
    start: expr
    expr: term (ADD_OP term)*
    term: factor (MUL_OP factor)*
    ?factor: INTEGER | "(" expr ")"
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/"
    INTEGER: /[+-]?[0-9]+/
"""

# LALR with lark's default contextual lexer, so "1-2" lexes "-" as ADD_OP
# while "2*-3" lexes "-3" as INTEGER
parser = Lark(grammar, parser="lalr")


class Calculate(Transformer):
    def INTEGER(self, n):
        return int(n)

    def _fold(self, values):
        result = values[0]
        for i in range(1, len(values), 2):
            result = OPERATORS[str(values[i])](result, values[i + 1])
        return result

    def expr(self, values):
        return self._fold(values)

    def term(self, values):
        return self._fold(values)

    def start(self, values):
        return values[0]


def evaluate_reference(expression):
    """Evaluate `expression` with lark; the whole string must be consumed."""
    try:
        tree = parser.parse(expression)
        return Calculate().transform(tree)
    except LarkError as e:
        logger.debug("lark rejected %r: %s", expression, e)
        raise InvalidExpression(expression) from e
