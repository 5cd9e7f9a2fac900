"""
Rebuild the diacritized string from token offsets and predictions.
"""

from typing import List, NamedTuple, Optional, Sequence

from .constants import (
    ALEF, TAF, SHIN, MATRES_LETTERS,
    STRESS_CHAR, VOCAL_SHVA_CHAR, PREFIX_CHAR,
)
from .decode import TokenPrediction


class TokenSpan(NamedTuple):
    """Half-open character range of one token in the cleaned text."""

    start: int
    end: int


def is_hebrew_letter(char: str) -> bool:
    return ALEF <= char <= TAF


def is_matres_letter(char: str) -> bool:
    return char in MATRES_LETTERS


def letter_marks(
    char: str,
    prediction: TokenPrediction,
    matres_mark: Optional[str] = None,
) -> str:
    """
    Marks to append after a single Hebrew letter.

    Order is fixed: shin/sin dot, nikud, stress, vocal shva, prefix.
    """
    marks = []

    if char == SHIN:
        marks.append(prediction.shin.mark)

    if prediction.nikud.is_placeholder:
        # Matres lectionis is only ever marked on alef, vav and yod
        if matres_mark and is_matres_letter(char):
            marks.append(matres_mark)
    else:
        marks.append(prediction.nikud.mark)

    if prediction.stress:
        marks.append(STRESS_CHAR)
    if prediction.vocal_shva:
        marks.append(VOCAL_SHVA_CHAR)
    if prediction.prefix:
        marks.append(PREFIX_CHAR)

    return ''.join(marks)


def reconstruct(
    text: str,
    spans: Sequence[TokenSpan],
    predictions: Sequence[TokenPrediction],
    matres_mark: Optional[str] = None,
) -> str:
    """
    Re-thread predictions onto the cleaned text.

    Text between tokens is copied as-is, multi-character tokens are copied
    without marks and empty spans (special tokens) are skipped. Only single
    Hebrew letters get marks.

    Args:
        text: Cleaned input text the offsets refer to
        spans: Token spans in tokenizer order
        predictions: Decoded predictions, aligned with spans
        matres_mark: Mark for matres lectionis letters, None to drop them

    Returns:
        Text with diacritics
    """
    if len(spans) != len(predictions):
        raise ValueError(
            f"Got {len(spans)} spans but {len(predictions)} predictions"
        )

    result: List[str] = []
    prev_end = 0

    for (start, end), prediction in zip(spans, predictions):
        # Add anything the tokenizer skipped
        if start > prev_end:
            result.append(text[prev_end:start])

        if end <= start:
            continue

        token_text = text[start:end]
        prev_end = end

        if len(token_text) != 1:
            result.append(token_text)
            continue

        result.append(token_text)
        if is_hebrew_letter(token_text):
            result.append(letter_marks(token_text, prediction, matres_mark))

    result.append(text[prev_end:])
    return ''.join(result)
