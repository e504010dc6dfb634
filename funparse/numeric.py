from functools import reduce

from funparse.combinators import some
from funparse.primitives import char, digit


def _place_value(digits):
    # most significant digit first, as written
    return reduce(lambda number, d: number * 10 + d, digits, 0)


def _apply_sign(pair):
    sign, number = pair
    if sign == "-":
        return -number
    # char("+", "-") can only have matched "+" here
    return number


natural = some(digit).map(_place_value)

integer = (char("+", "-") + natural).map(_apply_sign) | natural
