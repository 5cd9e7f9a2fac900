"""
Prediction decoding.

Turns the three logit arrays returned by the model into one
``TokenPrediction`` per token position.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .constants import NikudClass, ShinClass
from .errors import InferenceError

NUM_AUX_SIGNALS = 3  # stress, vocal shva, prefix


@dataclass(frozen=True)
class TokenPrediction:
    """Decoded predictions for a single token."""

    nikud: NikudClass = NikudClass.NONE
    shin: ShinClass = ShinClass.SHIN
    stress: bool = False
    vocal_shva: bool = False
    prefix: bool = False


def _batch_row(logits: np.ndarray, name: str, seq_len: int) -> np.ndarray:
    """Validate a [1, seq_len, num_classes] array and return its only batch row."""
    logits = np.asarray(logits)
    if logits.ndim != 3 or logits.shape[0] != 1:
        raise InferenceError(
            f"Expected {name} of shape [1, seq_len, num_classes], got {logits.shape}"
        )
    if logits.shape[1] != seq_len:
        raise InferenceError(
            f"{name} covers {logits.shape[1]} tokens, expected {seq_len}"
        )
    if np.isnan(logits).any():
        raise InferenceError(f"{name} contains NaN")
    return logits[0]


def _argmax(rows: np.ndarray, name: str) -> np.ndarray:
    if rows.shape[-1] == 0:
        raise InferenceError(f"{name} has no classes")
    # np.argmax returns the first maximum, so ties go to the lowest class index
    return np.argmax(rows, axis=-1)


def decode_predictions(
    nikud_logits: np.ndarray,
    shin_logits: np.ndarray,
    aux_logits: np.ndarray,
    seq_len: int,
) -> List[TokenPrediction]:
    """
    Decode model outputs into per-token predictions.

    Args:
        nikud_logits: Nikud scores [1, seq_len, 29]
        shin_logits: Shin/sin scores [1, seq_len, 2]
        aux_logits: Stress, vocal shva and prefix logits [1, seq_len, 3]
        seq_len: Number of tokens fed to the model

    Returns:
        One TokenPrediction per token position

    Raises:
        InferenceError: on bad shapes, NaN scores or unknown class indices
    """
    nikud_rows = _batch_row(nikud_logits, 'nikud_logits', seq_len)
    shin_rows = _batch_row(shin_logits, 'shin_logits', seq_len)
    aux_rows = _batch_row(aux_logits, 'aux_logits', seq_len)
    if aux_rows.shape[-1] < NUM_AUX_SIGNALS:
        raise InferenceError(
            f"aux_logits needs {NUM_AUX_SIGNALS} columns, got {aux_rows.shape[-1]}"
        )

    nikud_ids = _argmax(nikud_rows, 'nikud_logits')
    shin_ids = _argmax(shin_rows, 'shin_logits')
    # Logits are pre-sigmoid, zero is the decision boundary
    flags = aux_rows[:, :NUM_AUX_SIGNALS] > 0

    predictions = []
    for nikud_id, shin_id, (stress, vocal_shva, prefix) in zip(nikud_ids, shin_ids, flags):
        try:
            nikud = NikudClass(int(nikud_id))
            shin = ShinClass(int(shin_id))
        except ValueError as e:
            raise InferenceError(f"Predicted class out of range: {e}") from e

        predictions.append(TokenPrediction(
            nikud=nikud,
            shin=shin,
            stress=bool(stress),
            vocal_shva=bool(vocal_shva),
            prefix=bool(prefix),
        ))

    return predictions
