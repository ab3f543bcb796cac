from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable

from .errors import EmptyResponseError, UnparseableResponseError

logger = logging.getLogger(__name__)

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_FENCED_BLOCK = re.compile(r"```(?:[\w-]+)?\s*([\s\S]*?)\s*```")

_MISSING = object()


def strip_trailing_commas(text: str) -> str:
    """Drop commas that sit directly before a closing brace or bracket."""
    return _TRAILING_COMMA.sub(r"\1", text)


def extract_fenced_block(text: str) -> str | None:
    """Return the body of the first ```-fenced block, or None."""
    match = _FENCED_BLOCK.search(text)
    if match is None:
        return None
    return match.group(1)


def extract_brace_span(text: str) -> str | None:
    """Return text from the first ``{`` to the last ``}`` inclusive, or None."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def _try_parse(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        # JSONDecodeError, oversized integer literals and pathological nesting
        return _MISSING


def _parse_with_repair(text: str) -> Any:
    parsed = _try_parse(text)
    if parsed is _MISSING:
        parsed = _try_parse(strip_trailing_commas(text))
    return parsed


def clean_and_parse_json(text: str | None) -> Any:
    """Parse model output that should be JSON but may not quite be.

    Strategies are tried in order and the first one that parses wins:

    1. the raw text, as is and with trailing commas removed
    2. the body of a fenced code block (```json ... ```)
    3. the span between the first ``{`` and the last ``}``

    Raises:
        EmptyResponseError: ``text`` is empty or whitespace only.
        UnparseableResponseError: every strategy failed. The exception keeps
            the raw text for diagnostics.
    """
    if not text or not text.strip():
        raise EmptyResponseError()

    extractors: list[tuple[str, Callable[[str], str | None]]] = [
        ("direct", lambda value: value),
        ("fenced_block", extract_fenced_block),
        ("brace_span", extract_brace_span),
    ]
    for strategy, extract in extractors:
        candidate = extract(text)
        if candidate is None:
            continue
        parsed = _parse_with_repair(candidate)
        if parsed is not _MISSING:
            if strategy != "direct":
                logger.debug("Recovered JSON from model output", extra={"strategy": strategy})
            return parsed

    logger.error(
        "Unparseable model output",
        extra={"response": text[:2000], "response_length": len(text)},
    )
    raise UnparseableResponseError(text)


__all__ = [
    "clean_and_parse_json",
    "extract_brace_span",
    "extract_fenced_block",
    "strip_trailing_commas",
]
