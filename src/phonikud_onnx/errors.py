"""Exceptions raised by the diacritization engine."""


class PhonikudError(Exception):
    """Base exception for phonikud errors."""

    pass


class ConstructionError(PhonikudError):
    """Raised when the model or tokenizer file is missing or malformed."""

    pass


class TokenizationError(PhonikudError):
    """Raised when text cannot be encoded by the tokenizer."""

    pass


class InferenceError(PhonikudError):
    """Raised when inference fails or returns unusable predictions."""

    pass
