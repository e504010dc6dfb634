from funparse.core import Parser, ParsingResult

DIGITS = "0123456789"


def _digit(text):
    # ASCII digits only; str.isdigit would also accept "²" or "٣"
    if text and text[0] in DIGITS:
        return [ParsingResult(DIGITS.index(text[0]), text[1:])]
    return []


def char(*characters):
    for c in characters:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"char() expects single characters, got {c!r}")
    allowed = frozenset(characters)

    def _char(text):
        if text and text[0] in allowed:
            return [ParsingResult(text[0], text[1:])]
        return []

    return Parser(_char, name=f"char({', '.join(map(repr, characters))})")


def _letter(text):
    # Unicode letters as classified by str.isalpha
    if text and text[0].isalpha():
        return [ParsingResult(text[0], text[1:])]
    return []


digit = Parser(_digit, name="digit")
letter = Parser(_letter, name="letter")
