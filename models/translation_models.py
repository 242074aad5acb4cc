"""Models for translation requests.

Defines TranslationInfo and the TranslationMethod labels reported back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__: list[str] = ["TranslationInfo", "TranslationMethod"]


class TranslationMethod(StrEnum):
    """Tier that produced a translation."""

    NONE = "none"
    ONLINE = "online"
    OFFLINE_PACK = "offline_pack"
    OFFLINE_DICTIONARY = "offline_dictionary"
    LOCAL_DICTIONARY = "local_dictionary"

    @property
    def label(self) -> str:
        """Human readable description of the tier."""
        return _METHOD_LABELS[self]


_METHOD_LABELS: dict[TranslationMethod, str] = {
    TranslationMethod.NONE: "Not translated",
    TranslationMethod.ONLINE: "Online",
    TranslationMethod.OFFLINE_PACK: "Offline (Downloaded Pack)",
    TranslationMethod.OFFLINE_DICTIONARY: "Offline (Basic Dictionary)",
    TranslationMethod.LOCAL_DICTIONARY: "Local Dictionary",
}


@dataclass
class TranslationInfo:
    """Translation request and result information.

    Attributes:
        content (str): Original text to be translated.
        src_lang (str): Source language code.
        tgt_lang (str): Target language code.
        translated_text (str): Translation result.
        method (TranslationMethod): Tier that produced ``translated_text``.
        confidence (float | None): Confidence reported by the offline pack tier, otherwise None.
    """

    content: str = ""
    src_lang: str = ""
    tgt_lang: str = ""
    translated_text: str = ""
    method: TranslationMethod = TranslationMethod.NONE
    confidence: float | None = None
