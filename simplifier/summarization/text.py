import re

_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace, including byte order marks."""
    return _EDGE_SPACE.sub("", line)
