"""
Hebrew Unicode constants and the model's class tables.

See https://en.wikipedia.org/wiki/Unicode_and_HTML_for_the_Hebrew_alphabet#Compact_table
"""

from enum import IntEnum

# Vowel marks
SHVA = '\u05b0'
HATAF_SEGOL = '\u05b1'
HATAF_PATAH = '\u05b2'
HATAF_QAMATS = '\u05b3'
HIRIQ = '\u05b4'
TSERE = '\u05b5'
SEGOL = '\u05b6'
PATAH = '\u05b7'
QAMATS = '\u05b8'
HOLAM = '\u05b9'
HOLAM_HASER = '\u05ba'
QUBUTS = '\u05bb'
QAMATS_QATAN = '\u05c7'

# Other marks
DAGESH = '\u05bc'
SHIN_DOT = '\u05c1'
SIN_DOT = '\u05c2'
STRESS_CHAR = '\u05ab'  # "ole" marks stress
VOCAL_SHVA_CHAR = '\u05bd'  # "meteg" marks vocal shva
PREFIX_CHAR = '|'
MATRES_LECTIONIS_MARK = '\u05af'  # masora circle

# Character sets
ALEF = 'א'
TAF = 'ת'
SHIN = 'ש'
MATRES_LETTERS = 'אוי'  # alef, vav, yod

# Hebrew points block plus the prefix marker
NIKUD_PATTERN = r'[\u0590-\u05c7|]'


class NikudClass(IntEnum):
    """Nikud head classes, in model output order."""

    NONE = 0
    MATRES_LECTIONIS = 1
    DAGESH = 2
    SHVA = 3
    HATAF_SEGOL = 4
    HATAF_PATAH = 5
    HATAF_QAMATS = 6
    HIRIQ = 7
    TSERE = 8
    SEGOL = 9
    PATAH = 10
    QAMATS = 11
    HOLAM = 12
    HOLAM_HASER = 13
    QUBUTS = 14
    DAGESH_SHVA = 15
    DAGESH_HATAF_SEGOL = 16
    DAGESH_HATAF_PATAH = 17
    DAGESH_HATAF_QAMATS = 18
    DAGESH_HIRIQ = 19
    DAGESH_TSERE = 20
    DAGESH_SEGOL = 21
    DAGESH_PATAH = 22
    DAGESH_QAMATS = 23
    DAGESH_HOLAM = 24
    DAGESH_HOLAM_HASER = 25
    DAGESH_QUBUTS = 26
    QAMATS_QATAN = 27
    DAGESH_QAMATS_QATAN = 28

    @property
    def mark(self) -> str:
        """Combining marks for this class. Empty for NONE and the placeholder."""
        return NIKUD_MARKS[self]

    @property
    def is_placeholder(self) -> bool:
        return self is NikudClass.MATRES_LECTIONIS


class ShinClass(IntEnum):
    """Shin/sin head classes."""

    SHIN = 0
    SIN = 1

    @property
    def mark(self) -> str:
        return SIN_DOT if self is ShinClass.SIN else SHIN_DOT


_VOWELS = (
    SHVA, HATAF_SEGOL, HATAF_PATAH, HATAF_QAMATS, HIRIQ, TSERE,
    SEGOL, PATAH, QAMATS, HOLAM, HOLAM_HASER, QUBUTS,
)

# Class id -> marks
NIKUD_MARKS = dict(zip(
    NikudClass,
    ('', '', DAGESH)
    + _VOWELS
    + tuple(DAGESH + vowel for vowel in _VOWELS)
    + (QAMATS_QATAN, DAGESH + QAMATS_QATAN),
))
