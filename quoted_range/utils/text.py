"""Line-splitting helpers shared by the range engine and Range slicing."""

import re
from typing import List

NEWLINE_PATTERN = re.compile(r"\r\n|\n|\r")


def split_lines(text: str) -> List[str]:
    """
    Split text on any newline convention.

    Unlike ``str.splitlines`` a trailing newline yields a trailing empty
    line, so ``len(split_lines(text)) - 1`` is always the newline count.
    """
    return NEWLINE_PATTERN.split(text)


def line_offsets(text: str) -> List[int]:
    """Return the character offset at which each line of ``text`` starts."""
    return [0] + [match.end() for match in NEWLINE_PATTERN.finditer(text)]
