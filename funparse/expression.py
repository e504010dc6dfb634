import operator
from functools import lru_cache

from funparse.combinators import between, chainl, lazy
from funparse.numeric import integer
from funparse.primitives import char


def divide(dividend, divisor):
    # integer division truncating toward zero, so -7/2 == -3
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


def _operator(*symbols):
    return char(*symbols).map(OPERATORS.__getitem__)


def _parenthesised(inner):
    return between(char("("), inner, char(")"))


def _levels(factor):
    term = chainl(factor, _operator("*", "/"))
    return term, chainl(term, _operator("+", "-"))


# Precedence comes from the shape of the grammar alone:
#   expression := term (('+' | '-') term)*
#   term       := factor (('*' | '/') factor)*
#   factor     := integer | '(' expression ')'
factor = integer | _parenthesised(lazy(lambda: expression))

term, expression = _levels(factor)


@lru_cache(maxsize=None)
def bounded_expression(max_nesting):
    """The expression grammar, unable to open more than `max_nesting` parentheses.

    Built bottom up without `lazy`, so call depth is bounded by `max_nesting`.
    Text that would need deeper nesting is simply not consumed.
    """
    _, nested = _levels(integer)
    for _ in range(max_nesting):
        _, nested = _levels(integer | _parenthesised(nested))
    return nested
