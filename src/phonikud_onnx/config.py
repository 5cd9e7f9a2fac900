"""
Runtime configuration for the diacritization engine.

Provides default values and argparse setup shared by the command line tool.
"""

import argparse
from typing import List, Optional

BACKENDS = ("onnx", "torch")


class Config:
    """Engine configuration with defaults."""

    # Inference backend
    backend: str = "onnx"

    # ONNX Runtime
    intra_threads: int = 4
    graph_optimization: str = "all"
    providers: Optional[List[str]] = None

    # TorchScript
    device: Optional[str] = None  # None for auto-detect

    def __init__(self, **kwargs):
        """Initialize config with optional overrides."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    @classmethod
    def build_parser(cls, description: str = "Add nikud to Hebrew text") -> argparse.ArgumentParser:
        """Create an argument parser with the engine options."""
        parser = argparse.ArgumentParser(
            description=description,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )

        # Model files
        parser.add_argument("--model", type=str, required=True,
                          help="Path to the model file (ONNX or TorchScript)")
        parser.add_argument("--tokenizer", type=str, required=True,
                          help="Path to tokenizer.json")

        # Backend arguments
        parser.add_argument("--backend", type=str, default=cls.backend,
                          choices=BACKENDS,
                          help="Inference backend")
        parser.add_argument("--threads", type=int, default=cls.intra_threads,
                          help="ONNX Runtime intra-op threads")
        parser.add_argument("--graph-optimization", type=str, default=cls.graph_optimization,
                          choices=["disable", "basic", "extended", "all"],
                          help="ONNX Runtime graph optimization level")
        parser.add_argument("--provider", type=str, action="append", dest="providers",
                          default=cls.providers,
                          help="ONNX Runtime execution provider (repeatable)")
        parser.add_argument("--device", type=str, default=cls.device,
                          help="Device for the torch backend (cpu/cuda/mps, None for auto)")

        return parser

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "Config":
        """Create config from parsed arguments."""
        return cls(
            backend=args.backend,
            intra_threads=args.threads,
            graph_optimization=args.graph_optimization,
            providers=args.providers,
            device=args.device,
        )

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "Config":
        """Parse arguments and create config."""
        args = cls.build_parser().parse_args(argv)
        return cls.from_namespace(args)

    def __repr__(self):
        """String representation of config."""
        lines = ["Configuration:"]
        for key in ("backend", "intra_threads", "graph_optimization", "providers", "device"):
            lines.append(f"  {key}: {getattr(self, key)}")
        return "\n".join(lines)
