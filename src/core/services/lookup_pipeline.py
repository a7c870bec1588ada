"""Lookup orchestration utilities.

The CLI delegates the whole search -> summary -> parse flow to these
helpers, which keeps side-effects (printing, spinner) out of the core logic
and lets tests drive the pipeline with a fake `EncyclopediaSource`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from pydantic import ValidationError

from core.domain.errors import DecodeError
from core.domain.models import (
    DISAMBIGUATION_MESSAGE,
    NO_EXTRACT_FALLBACK,
    LookupResult,
    SummaryPayload,
)
from core.interfaces.encyclopedia import EncyclopediaSource

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    searching: Callable[[str], None] | None = None
    title_resolved: Callable[[str], None] | None = None


def build_query(words: Sequence[str]) -> str:
    """Join the CLI words with single spaces, in order."""

    if not words:
        raise ValueError("at least one word is required to build a query")
    return " ".join(words)


def decode_summary(body: str) -> SummaryPayload:
    """Decode a REST summary body; `DecodeError` on bad JSON or schema."""

    try:
        return SummaryPayload.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError.from_validation(exc) from exc


def render_summary(payload: SummaryPayload) -> str:
    text = payload.extract if payload.extract is not None else NO_EXTRACT_FALLBACK
    # Page could be ambiguous; the user has to refine the query.
    if payload.is_disambiguation:
        return DISAMBIGUATION_MESSAGE
    return text


def parse_summary(body: str) -> str:
    """Decode `body` and return the text to show the user."""

    return render_summary(decode_summary(body))


def run_lookup(
    query: str,
    source: EncyclopediaSource,
    hooks: PipelineHooks | None = None,
) -> LookupResult:
    """Resolve `query` to a title and return its rendered summary.

    Every failure propagates as a `WikiLookupError`; nothing is retried and
    the summary is never requested when the search fails.
    """

    hooks = hooks or PipelineHooks()

    if hooks.searching:
        hooks.searching(query)
    title = source.search_title(query)
    logger.info("resolved %r -> %r", query, title)

    if hooks.title_resolved:
        hooks.title_resolved(title)
    body = source.fetch_summary(title)

    payload = decode_summary(body)
    logger.debug("summary type=%s extract=%s", payload.response_type, payload.extract is not None)
    return LookupResult(
        query=query,
        title=title,
        text=render_summary(payload),
        disambiguation=payload.is_disambiguation,
    )
