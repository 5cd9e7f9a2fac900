"""
Inference backends for the Hebrew nikud model.

Each backend takes the tokenizer arrays and returns three logit arrays:
- Nikud classes [1, seq_len, 29]
- Shin/sin classes [1, seq_len, 2]
- Stress, vocal shva and prefix logits [1, seq_len, 3]

Backends hold an execution context that is not safe for concurrent use. Use
one instance per thread or guard calls with a lock.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import onnxruntime as ort

from .errors import ConstructionError, InferenceError

logger = logging.getLogger(__name__)

Logits = Tuple[np.ndarray, np.ndarray, np.ndarray]

GRAPH_OPTIMIZATION_LEVELS = {
    'disable': ort.GraphOptimizationLevel.ORT_DISABLE_ALL,
    'basic': ort.GraphOptimizationLevel.ORT_ENABLE_BASIC,
    'extended': ort.GraphOptimizationLevel.ORT_ENABLE_EXTENDED,
    'all': ort.GraphOptimizationLevel.ORT_ENABLE_ALL,
}


def _check_model_file(model_path: Union[str, Path]) -> Path:
    path = Path(model_path)
    if not path.is_file():
        raise ConstructionError(f"Model file not found: {path}")
    return path


def _split_outputs(outputs) -> Logits:
    if len(outputs) < 3:
        raise InferenceError(f"Model returned {len(outputs)} outputs, expected 3")
    nikud_logits, shin_logits, aux_logits = outputs[:3]
    return np.asarray(nikud_logits), np.asarray(shin_logits), np.asarray(aux_logits)


class OnnxNikudModel:
    """ONNX Runtime inference backend."""

    def __init__(
        self,
        model_path: Union[str, Path],
        intra_threads: int = 4,
        graph_optimization: str = 'all',
        providers: Optional[List[str]] = None,
    ):
        """
        Args:
            model_path: Path to the exported ONNX model
            intra_threads: Threads used inside a single operator
            graph_optimization: One of 'disable', 'basic', 'extended', 'all'
            providers: ONNX Runtime execution providers (None for default)
        """
        path = _check_model_file(model_path)
        if graph_optimization not in GRAPH_OPTIMIZATION_LEVELS:
            raise ConstructionError(
                f"Unknown graph optimization level: {graph_optimization}"
            )

        sess_options = ort.SessionOptions()
        sess_options.graph_optimization_level = GRAPH_OPTIMIZATION_LEVELS[graph_optimization]
        sess_options.intra_op_num_threads = intra_threads

        try:
            self.session = ort.InferenceSession(
                str(path),
                sess_options=sess_options,
                providers=providers,
            )
        except Exception as e:
            raise ConstructionError(f"Failed to load ONNX model: {e}") from e

        self.input_names = {i.name for i in self.session.get_inputs()}
        logger.info(f"Loaded ONNX model from {path}")
        logger.debug(f"ONNX model requires inputs: {self.input_names}")

    def infer(
        self,
        input_ids: np.ndarray,
        attention_mask: np.ndarray,
        token_type_ids: np.ndarray,
    ) -> Logits:
        feeds = {
            'input_ids': input_ids,
            'attention_mask': attention_mask,
            'token_type_ids': token_type_ids,
        }
        # Only feed what the graph declares
        feeds = {name: value for name, value in feeds.items() if name in self.input_names}

        try:
            outputs = self.session.run(None, feeds)
        except Exception as e:
            raise InferenceError(f"ONNX inference failed: {e}") from e

        return _split_outputs(outputs)


def default_device() -> str:
    import torch

    return 'cuda' if torch.cuda.is_available() else 'mps' if torch.backends.mps.is_available() else 'cpu'


class TorchScriptNikudModel:
    """TorchScript inference backend. Requires the ``torch`` extra."""

    def __init__(self, model_path: Union[str, Path], device: Optional[str] = None):
        """
        Args:
            model_path: Path to a TorchScript archive (``torch.jit.save``)
            device: Device to run on (None for auto-detect)
        """
        import torch

        path = _check_model_file(model_path)
        if device is None:
            device = default_device()

        self.device = device
        logger.info(f"Loading TorchScript model on device: {device}")

        try:
            self.model = torch.jit.load(str(path), map_location=device)
        except Exception as e:
            raise ConstructionError(f"Failed to load TorchScript model: {e}") from e

        self.model.eval()

    def infer(
        self,
        input_ids: np.ndarray,
        attention_mask: np.ndarray,
        token_type_ids: np.ndarray,
    ) -> Logits:
        import torch

        try:
            with torch.no_grad():
                outputs = self.model(
                    torch.from_numpy(input_ids).to(self.device),
                    torch.from_numpy(attention_mask).to(self.device),
                    torch.from_numpy(token_type_ids).to(self.device),
                )
        except Exception as e:
            raise InferenceError(f"TorchScript inference failed: {e}") from e

        return _split_outputs([output.float().cpu().numpy() for output in outputs])
