import logging

from funparse.config import EvaluatorConfig
from funparse.errors import ExpressionTooDeep, InvalidExpression, TrailingInput
from funparse.expression import bounded_expression

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = EvaluatorConfig()


def nesting_depth(text):
    """Deepest nesting of balanced parentheses; unmatched ones do not count."""
    open_depths = []
    deepest = 0
    for c in text:
        if c == "(":
            open_depths.append(len(open_depths) + 1)
        elif c == ")" and open_depths:
            deepest = max(deepest, open_depths.pop())
    return deepest


def _too_deep(text, config):
    depth = nesting_depth(text)
    if depth > config.max_nesting:
        return ExpressionTooDeep(text, depth, config.max_nesting)
    return None


def parse(text, config=None):
    """Run the expression parser and return its first result.

    At most `config.max_nesting` parentheses are opened; deeper text is left
    unparsed like any other text the grammar cannot use. Raises
    InvalidExpression when there is no parse, ExpressionTooDeep when that is
    because of the nesting limit. Trailing input is left for the caller.
    """
    config = config or DEFAULT_CONFIG
    if config.strip_whitespace:
        text = text.strip()

    try:
        results = bounded_expression(config.max_nesting)(text)
    except RecursionError:
        raise ExpressionTooDeep(text) from None

    if not results:
        logger.debug("no parse for %r", text)
        raise _too_deep(text, config) or InvalidExpression(text)
    return results[0]


def evaluate(text, config=None):
    """Evaluate an integer arithmetic expression such as "(3+2)*3"."""
    config = config or DEFAULT_CONFIG
    value, unparsed = parse(text, config)
    if unparsed and config.require_full_input:
        logger.debug("rejecting %r, %r left unparsed", text, unparsed)
        raise _too_deep(unparsed, config) or TrailingInput(text, value, unparsed)
    logger.debug("evaluated %r to %d", text, value)
    return value
