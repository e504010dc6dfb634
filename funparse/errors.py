class FunparseError(Exception):
    """Base class for errors raised at the evaluation boundary."""


class InvalidExpression(FunparseError, ValueError):
    def __init__(self, text, reason="not a valid expression"):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class TrailingInput(InvalidExpression):
    def __init__(self, text, value, unparsed):
        self.value = value
        self.unparsed = unparsed
        super().__init__(text, reason=f"unexpected trailing input {unparsed!r}")


class ExpressionTooDeep(InvalidExpression):
    def __init__(self, text, depth=None, limit=None):
        self.depth = depth
        self.limit = limit
        if depth is None:
            reason = "expression nested too deeply"
        else:
            reason = f"expression nested {depth} levels deep, limit is {limit}"
        super().__init__(text, reason=reason)
