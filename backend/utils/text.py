"""Bilingual (English / Arabic) normalization and matching helpers."""

import re
import unicodedata
from typing import Callable, Literal

import icu
import pyarabic.araby as araby

Language = Literal["en", "ar"]

_ALEF_VARIANTS = str.maketrans({
    araby.ALEF_HAMZA_ABOVE: araby.ALEF,
    araby.ALEF_HAMZA_BELOW: araby.ALEF,
    araby.ALEF_MADDA: araby.ALEF,
})
_WHITESPACE = re.compile(r"\s+")

# Primary strength compares base letters only (no diacritics, no case)
_ARABIC_COLLATOR = icu.Collator.createInstance(icu.Locale("ar"))
_ARABIC_COLLATOR.setStrength(icu.Collator.PRIMARY)


def normalize_english(text: str | None) -> str:
    return (text or "").lower()


def normalize_arabic(text: str | None) -> str:
    """NFC, fold alef variants to bare alef, collapse whitespace, trim."""
    text = unicodedata.normalize("NFC", text or "")
    text = text.translate(_ALEF_VARIANTS)
    return _WHITESPACE.sub(" ", text).strip()


_NORMALIZERS: dict[str, Callable[[str | None], str]] = {
    "en": normalize_english,
    "ar": normalize_arabic,
}


def get_normalizer(language: Language) -> Callable[[str | None], str]:
    return _NORMALIZERS[language]


def arabic_sort_key(text: str) -> bytes:
    """ICU Arabic collation key at base-letter strength."""
    return _ARABIC_COLLATOR.getSortKey(text)
