"""Resolve raw operator tokens against the catalog."""

from __future__ import annotations

import logging

from fantasticcal.catalog import OPERATORS, BoundOperator
from fantasticcal.exceptions import NoOperatorMatchError

logger = logging.getLogger(__name__)


def match_operator(token: str | None) -> BoundOperator | None:
    """
    Find the catalog operator matching a raw token.

    Operators are tried in catalog order and the first whose pattern matches
    the whole token wins. The token is bound exactly as given, so callers
    strip surrounding whitespace themselves. Each call returns a fresh
    BoundOperator.

    Args:
        token: Text typed by the user, possibly None

    Returns:
        The bound operator, or None if nothing matches
    """
    if token is None:
        return None

    for operator in OPERATORS:
        if operator.matches(token):
            return operator.bind(token)

    logger.debug("No operator matches %r", token)
    return None


def require_operator(token: str | None) -> BoundOperator:
    """
    Like match_operator, but raise when nothing matches.

    Raises:
        NoOperatorMatchError: If the token matches no operator
    """
    bound = match_operator(token)
    if bound is None:
        raise NoOperatorMatchError(token)
    return bound
