"""
Diacritization engine.

Runs cleanup, tokenization, inference, decoding and reconstruction for one
string at a time.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

import numpy as np

from .config import Config
from .decode import decode_predictions
from .errors import ConstructionError
from .model import Logits, OnnxNikudModel, TorchScriptNikudModel
from .normalize import strip_diacritics
from .reconstruct import TokenSpan, reconstruct
from .tokenizer import Encoding, NikudTokenizer, build_model_inputs

logger = logging.getLogger(__name__)


class TokenizationProvider(Protocol):
    def encode(self, text: str) -> Encoding:
        ...


class InferenceProvider(Protocol):
    def infer(
        self,
        input_ids: np.ndarray,
        attention_mask: np.ndarray,
        token_type_ids: np.ndarray,
    ) -> Logits:
        ...


def load_model(model_path: Union[str, Path], config: Config) -> InferenceProvider:
    """Create the inference backend selected by config."""
    if config.backend == "onnx":
        return OnnxNikudModel(
            model_path,
            intra_threads=config.intra_threads,
            graph_optimization=config.graph_optimization,
            providers=config.providers,
        )
    if config.backend == "torch":
        return TorchScriptNikudModel(model_path, device=config.device)
    raise ConstructionError(f"Unknown backend: {config.backend}")


class Phonikud:
    """
    Adds nikud, shin/sin dots, stress, vocal shva and prefix marks to Hebrew text.

    An instance is not thread safe: the inference backend must not be used
    from several threads at once. Use one instance per thread or an external
    lock.
    """

    def __init__(
        self,
        model_path: Union[str, Path],
        tokenizer_path: Union[str, Path],
        config: Optional[Config] = None,
    ):
        """
        Args:
            model_path: Path to the model file
            tokenizer_path: Path to tokenizer.json
            config: Engine configuration (None for defaults)

        Raises:
            ConstructionError: if either file is missing or malformed
        """
        config = config or Config()
        self.model = load_model(model_path, config)
        self.tokenizer = NikudTokenizer(tokenizer_path)

    @classmethod
    def from_providers(
        cls,
        tokenizer: TokenizationProvider,
        model: InferenceProvider,
    ) -> "Phonikud":
        """Create an engine around already constructed providers."""
        engine = cls.__new__(cls)
        engine.tokenizer = tokenizer
        engine.model = model
        return engine

    def diacritize(self, text: str, matres_mark: Optional[str] = None) -> str:
        """
        Add diacritics to Hebrew text.

        Existing nikud is removed first, so partially pointed input is fine.

        Args:
            text: Hebrew text, may contain mixed content
            matres_mark: Mark for matres lectionis letters (None to drop them)

        Returns:
            Text with diacritics, non-Hebrew characters preserved

        Raises:
            TokenizationError: if the text cannot be encoded
            InferenceError: if inference fails or returns unusable predictions
        """
        clean_text = strip_diacritics(text)
        if not clean_text.strip():
            return clean_text

        encoding = self.tokenizer.encode(clean_text)
        inputs = build_model_inputs(encoding)
        seq_len = len(encoding)
        logger.debug(f"Encoded {len(clean_text)} characters into {seq_len} tokens")

        nikud_logits, shin_logits, aux_logits = self.model.infer(
            inputs['input_ids'],
            inputs['attention_mask'],
            inputs['token_type_ids'],
        )
        predictions = decode_predictions(nikud_logits, shin_logits, aux_logits, seq_len)

        spans = [TokenSpan(start, end) for start, end in encoding.offsets]
        return reconstruct(clean_text, spans, predictions, matres_mark)

    def diacritize_default(self, text: str) -> str:
        """Add diacritics without marking matres lectionis."""
        return self.diacritize(text)

    def add_diacritics(self, text: str, mark_matres_lectionis: Optional[str] = None) -> str:
        return self.diacritize(text, matres_mark=mark_matres_lectionis)
