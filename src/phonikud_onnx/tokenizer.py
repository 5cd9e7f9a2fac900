"""
Tokenization and model input assembly.

Wraps a HuggingFace fast tokenizer loaded from a ``tokenizer.json`` file and
turns its output into the int64 arrays the model expects.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Union

import numpy as np
from transformers import PreTrainedTokenizerFast

from .errors import ConstructionError, TokenizationError

logger = logging.getLogger(__name__)

MODEL_INPUT_NAMES = ('input_ids', 'attention_mask', 'token_type_ids')


@dataclass
class Encoding:
    """Tokenizer output for one text. Offsets index the cleaned text."""

    ids: List[int]
    attention_mask: List[int]
    type_ids: List[int]
    offsets: List[Tuple[int, int]]

    def __len__(self) -> int:
        return len(self.ids)


class NikudTokenizer:
    """Tokenization provider backed by ``PreTrainedTokenizerFast``."""

    def __init__(self, tokenizer_path: Union[str, Path]):
        """
        Args:
            tokenizer_path: Path to a ``tokenizer.json`` file
        """
        path = Path(tokenizer_path)
        if not path.is_file():
            raise ConstructionError(f"Tokenizer file not found: {path}")

        try:
            self.tokenizer = PreTrainedTokenizerFast(tokenizer_file=str(path))
        except Exception as e:
            raise ConstructionError(f"Failed to load tokenizer: {e}") from e

        logger.info(f"Loaded tokenizer from {path}")

    def encode(self, text: str) -> Encoding:
        """Tokenize text, adding special tokens. No padding or truncation."""
        try:
            output = self.tokenizer(
                text,
                add_special_tokens=True,
                padding=False,
                truncation=False,
                return_attention_mask=True,
                return_token_type_ids=True,
                return_offsets_mapping=True,
            )
        except Exception as e:
            raise TokenizationError(f"Tokenization failed: {e}") from e

        return Encoding(
            ids=list(output['input_ids']),
            attention_mask=list(output['attention_mask']),
            type_ids=list(output['token_type_ids']),
            offsets=[(int(start), int(end)) for start, end in output['offset_mapping']],
        )


def build_model_inputs(encoding: Encoding) -> Dict[str, np.ndarray]:
    """
    Build the batch-of-one int64 arrays fed to the model.

    Args:
        encoding: Tokenizer output

    Returns:
        Dictionary with ``input_ids``, ``attention_mask`` and ``token_type_ids``,
        each of shape [1, seq_len]
    """
    seq_len = len(encoding.ids)
    columns = (encoding.ids, encoding.attention_mask, encoding.type_ids)
    lengths = {len(column) for column in columns} | {len(encoding.offsets)}
    if lengths != {seq_len}:
        raise TokenizationError(
            f"Tokenizer returned sequences of unequal length: {sorted(lengths)}"
        )

    return {
        name: np.asarray(column, dtype=np.int64).reshape(1, seq_len)
        for name, column in zip(MODEL_INPUT_NAMES, columns)
    }
