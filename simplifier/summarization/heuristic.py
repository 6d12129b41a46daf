from simplifier.summarization.models import (
    MAX_KEY_POINTS,
    ORIGINAL_EXTRACT_LIMIT,
    SummaryResult,
)
from simplifier.summarization.text import trim_line

SUMMARY_LINE_COUNT = 4
SUMMARY_CHAR_LIMIT = 800
PLACEHOLDER_KEY_POINT = "See document for details."


def heuristic_summary(text: str) -> SummaryResult:
    """Summarize without a language model by taking the leading lines.

    Deterministic and total: any string, including an empty one, yields a
    result with at least one key point. The extract keeps the text verbatim.
    """
    lines = [trimmed for trimmed in (trim_line(line) for line in text.split("\n")) if trimmed]
    summary = " ".join(lines[:SUMMARY_LINE_COUNT])[:SUMMARY_CHAR_LIMIT] or text[:SUMMARY_CHAR_LIMIT]
    return SummaryResult(
        summary=summary,
        key_points=lines[:MAX_KEY_POINTS] or [PLACEHOLDER_KEY_POINT],
        original_extract=text[:ORIGINAL_EXTRACT_LIMIT],
    )
