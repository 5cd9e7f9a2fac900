"""Text cleanup applied before tokenization."""

import re

from .constants import NIKUD_PATTERN

_nikud_re = re.compile(NIKUD_PATTERN)


def strip_diacritics(text: str) -> str:
    """
    Remove Hebrew points, cantillation and prefix markers from text.

    Everything in U+0590..U+05C7 and the '|' character is dropped. Letters and
    non-Hebrew characters are kept, so the function is idempotent.
    """
    return _nikud_re.sub('', text)
