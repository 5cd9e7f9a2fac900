"""Shared fixtures: a tiny character tokenizer and fake inference backends."""

import numpy as np
import pytest

from phonikud_onnx.constants import NikudClass, ShinClass

HEBREW_LETTERS = 'אבגדהוזחטיכךלמםנןסעפףצץקרשת'
OTHER_CHARS = '.,!?-:"\'abcdefghijklmnopqrstuvwxyz0123456789'


def one_hot(seq_len: int, num_classes: int, index: int) -> np.ndarray:
    """Logits of shape [1, seq_len, num_classes] that pick `index` everywhere."""
    logits = np.full((1, seq_len, num_classes), -1.0, dtype=np.float32)
    logits[:, :, index] = 1.0
    return logits


class FixedModel:
    """Inference backend that predicts the same classes for every token."""

    def __init__(
        self,
        nikud: NikudClass = NikudClass.NONE,
        shin: ShinClass = ShinClass.SHIN,
        stress: bool = False,
        vocal_shva: bool = False,
        prefix: bool = False,
    ):
        self.nikud = nikud
        self.shin = shin
        self.aux = [stress, vocal_shva, prefix]
        self.calls = []

    def infer(self, input_ids, attention_mask, token_type_ids):
        self.calls.append((input_ids, attention_mask, token_type_ids))
        seq_len = input_ids.shape[1]
        aux = np.tile(
            np.where(self.aux, 2.0, -2.0).astype(np.float32),
            (1, seq_len, 1),
        )
        return (
            one_hot(seq_len, len(NikudClass), self.nikud),
            one_hot(seq_len, len(ShinClass), self.shin),
            aux,
        )


@pytest.fixture
def tokenizer_file(tmp_path):
    """Character level tokenizer.json: one token per non-space character."""
    from tokenizers import Regex, Tokenizer, models, pre_tokenizers, processors

    vocab = {'[PAD]': 0, '[UNK]': 1, '[CLS]': 2, '[SEP]': 3}
    for char in HEBREW_LETTERS + OTHER_CHARS:
        vocab.setdefault(char, len(vocab))

    tokenizer = Tokenizer(models.WordLevel(vocab=vocab, unk_token='[UNK]'))
    tokenizer.pre_tokenizer = pre_tokenizers.Sequence([
        pre_tokenizers.WhitespaceSplit(),
        pre_tokenizers.Split(Regex('.'), behavior='isolated'),
    ])
    tokenizer.post_processor = processors.TemplateProcessing(
        single='[CLS] $A [SEP]',
        special_tokens=[('[CLS]', 2), ('[SEP]', 3)],
    )

    path = tmp_path / 'tokenizer.json'
    tokenizer.save(str(path))
    return path


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / 'model.onnx'
    path.write_bytes(b'not a real model')
    return path
