"""Context-local collection of matcher results."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from verity.matchers.base import MatcherResult


MATCHER_RESULTS_COLLECTOR: ContextVar[list[MatcherResult] | None] = ContextVar(
    "matcher_results_collector", default=None
)


@contextmanager
def matcher_results_collector(ctx: list[MatcherResult]) -> Iterator[None]:
    """Append every matcher result evaluated inside the ``with`` block to ``ctx``.

    Parameters
    ----------
    ctx : list[MatcherResult]
        The list receiving results, in evaluation order.
    """
    token = MATCHER_RESULTS_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        MATCHER_RESULTS_COLLECTOR.reset(token)


def record_result(result: MatcherResult) -> None:
    """Append ``result`` to the active collector, if one is bound."""
    if (collected := MATCHER_RESULTS_COLLECTOR.get()) is not None:
        collected.append(result)
