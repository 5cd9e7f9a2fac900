"""Tests for tokenization and model input assembly."""

from unittest.mock import MagicMock

import numpy as np
import pytest

from phonikud_onnx.errors import ConstructionError, TokenizationError
from phonikud_onnx.tokenizer import Encoding, NikudTokenizer, build_model_inputs


class TestNikudTokenizer:
    """Test the tokenizer.json backed provider."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConstructionError, match='not found'):
            NikudTokenizer(tmp_path / 'missing.json')

    def test_malformed_file(self, tmp_path):
        path = tmp_path / 'tokenizer.json'
        path.write_text('{"not": "a tokenizer"', encoding='utf-8')

        with pytest.raises(ConstructionError, match='Failed to load tokenizer'):
            NikudTokenizer(path)

    def test_encode_offsets(self, tokenizer_file):
        """Test that offsets point into the text and special tokens are empty."""
        tokenizer = NikudTokenizer(tokenizer_file)

        encoding = tokenizer.encode('שלום עולם')

        assert len(encoding) == 10
        assert encoding.offsets[0] == (0, 0)
        assert encoding.offsets[-1] == (0, 0)
        assert encoding.offsets[1:-1] == [
            (0, 1), (1, 2), (2, 3), (3, 4),
            (5, 6), (6, 7), (7, 8), (8, 9),
        ]
        assert encoding.attention_mask == [1] * 10
        assert encoding.type_ids == [0] * 10

    def test_encode_failure(self, tokenizer_file):
        """Test that provider errors surface as TokenizationError."""
        tokenizer = NikudTokenizer(tokenizer_file)
        tokenizer.tokenizer = MagicMock(side_effect=RuntimeError('bad vocab'))

        with pytest.raises(TokenizationError, match='bad vocab'):
            tokenizer.encode('שלום')


class TestBuildModelInputs:
    """Test array assembly."""

    def test_shapes_and_dtype(self):
        encoding = Encoding(
            ids=[2, 10, 11, 3],
            attention_mask=[1, 1, 1, 1],
            type_ids=[0, 0, 0, 0],
            offsets=[(0, 0), (0, 1), (1, 2), (0, 0)],
        )

        inputs = build_model_inputs(encoding)

        assert set(inputs) == {'input_ids', 'attention_mask', 'token_type_ids'}
        for array in inputs.values():
            assert array.shape == (1, 4)
            assert array.dtype == np.int64
        np.testing.assert_array_equal(inputs['input_ids'], [[2, 10, 11, 3]])

    def test_unequal_lengths(self):
        encoding = Encoding(
            ids=[2, 10, 3],
            attention_mask=[1, 1],
            type_ids=[0, 0, 0],
            offsets=[(0, 0), (0, 1), (0, 0)],
        )

        with pytest.raises(TokenizationError, match='unequal length'):
            build_model_inputs(encoding)
