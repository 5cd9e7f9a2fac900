from .constants import MATRES_LECTIONIS_MARK, NikudClass, ShinClass
from .engine import Phonikud
from .errors import ConstructionError, InferenceError, PhonikudError, TokenizationError
from .normalize import strip_diacritics

__all__ = [
    "Phonikud",
    "NikudClass",
    "ShinClass",
    "MATRES_LECTIONIS_MARK",
    "strip_diacritics",
    "PhonikudError",
    "ConstructionError",
    "TokenizationError",
    "InferenceError",
]
