"""Parsing of free-form chat-model replies into a summary and key points.

Bullet detection is literal: a line counts as a key point when, after
trimming, it starts with "-", "•" or digits followed by ".". Replies that
use other list styles yield the placeholder key point.
"""

import re

from simplifier.summarization.models import MAX_KEY_POINTS, ParsedReply
from simplifier.summarization.text import trim_line

SUMMARY_LINE_COUNT = 3
PLACEHOLDER_KEY_POINT = "See full summary."

_BULLET_MARKER = re.compile(r"^(-|\d+\.|•)\s*")


def parse_reply(reply: str) -> ParsedReply:
    lines = reply.split("\n")
    summary = trim_line(" ".join(lines[:SUMMARY_LINE_COUNT])) or reply
    key_points = [
        trim_line(_BULLET_MARKER.sub("", trim_line(line), count=1))
        for line in lines
        if _BULLET_MARKER.match(trim_line(line))
    ][:MAX_KEY_POINTS]
    return ParsedReply(
        summary=summary,
        key_points=key_points or [PLACEHOLDER_KEY_POINT],
    )
