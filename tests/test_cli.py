"""Tests for the command line tool."""

from unittest.mock import MagicMock, patch

import pytest

from phonikud_onnx import cli
from phonikud_onnx.config import Config
from phonikud_onnx.constants import MATRES_LECTIONIS_MARK
from phonikud_onnx.errors import ConstructionError, InferenceError

BASE_ARGS = ['--model', 'model.onnx', '--tokenizer', 'tokenizer.json']


@pytest.fixture
def mock_engine():
    with patch('phonikud_onnx.cli.Phonikud') as engine_cls:
        engine = MagicMock()
        engine.diacritize.side_effect = lambda text, matres_mark=None: f'<{text}|{matres_mark}>'
        engine_cls.return_value = engine
        yield engine_cls, engine


class TestConfig:
    """Test config defaults and argument parsing."""

    def test_defaults(self):
        config = Config()
        assert config.backend == 'onnx'
        assert config.intra_threads == 4
        assert config.graph_optimization == 'all'
        assert config.providers is None
        assert config.device is None

    def test_overrides_ignore_unknown_keys(self):
        config = Config(intra_threads=1, unknown=True)
        assert config.intra_threads == 1
        assert not hasattr(config, 'unknown')

    def test_from_args(self):
        config = Config.from_args(BASE_ARGS + [
            '--backend', 'torch', '--device', 'cpu', '--threads', '2',
            '--provider', 'CPUExecutionProvider',
        ])
        assert config.backend == 'torch'
        assert config.device == 'cpu'
        assert config.intra_threads == 2
        assert config.providers == ['CPUExecutionProvider']

    def test_repr(self):
        assert 'backend: onnx' in repr(Config())


class TestMain:
    """Test the CLI entry point with a mocked engine."""

    def test_text(self, mock_engine, capsys):
        engine_cls, engine = mock_engine

        assert cli.main(BASE_ARGS + ['--text', 'שלום']) == 0

        assert capsys.readouterr().out.strip() == '<שלום|None>'
        args, _ = engine_cls.call_args
        assert args[:2] == ('model.onnx', 'tokenizer.json')
        assert isinstance(args[2], Config)

    def test_matres_flags(self, mock_engine, capsys):
        cli.main(BASE_ARGS + ['--text', 'טוב', '--mark-matres-lectionis'])
        assert capsys.readouterr().out.strip() == f'<טוב|{MATRES_LECTIONIS_MARK}>'

        cli.main(BASE_ARGS + ['--text', 'טוב', '--matres-mark', '*'])
        assert capsys.readouterr().out.strip() == '<טוב|*>'

    def test_file_to_output(self, mock_engine, tmp_path):
        input_file = tmp_path / 'input.txt'
        input_file.write_text('שלום\n\n  עולם  \n', encoding='utf-8')
        output_file = tmp_path / 'output.txt'

        assert cli.main(BASE_ARGS + ['--file', str(input_file), '--output', str(output_file)]) == 0

        assert output_file.read_text(encoding='utf-8') == '<שלום|None>\n<עולם|None>\n'

    def test_interactive(self, mock_engine, capsys):
        with patch('builtins.input', side_effect=['שלום', '   ', EOFError]):
            assert cli.main(BASE_ARGS) == 0

        out = capsys.readouterr().out
        assert '<שלום|None>' in out
        assert 'Exiting' in out

    def test_construction_error(self, capsys):
        with patch('phonikud_onnx.cli.Phonikud', side_effect=ConstructionError('Model file not found')):
            assert cli.main(BASE_ARGS + ['--text', 'שלום']) == 1
        assert 'Model file not found' in capsys.readouterr().err

    def test_inference_error(self, mock_engine, capsys):
        _, engine = mock_engine
        engine.diacritize.side_effect = InferenceError('NaN')

        assert cli.main(BASE_ARGS + ['--text', 'שלום']) == 1
        assert 'NaN' in capsys.readouterr().err
