from __future__ import annotations

import pytest

from models.translation_models import TranslationInfo, TranslationMethod


@pytest.mark.parametrize(
    ("method", "label"),
    [
        (TranslationMethod.ONLINE, "Online"),
        (TranslationMethod.OFFLINE_PACK, "Offline (Downloaded Pack)"),
        (TranslationMethod.OFFLINE_DICTIONARY, "Offline (Basic Dictionary)"),
        (TranslationMethod.LOCAL_DICTIONARY, "Local Dictionary"),
        (TranslationMethod.NONE, "Not translated"),
    ],
)
def test_method_labels(method: TranslationMethod, label: str) -> None:
    assert method.label == label


def test_translation_info_defaults() -> None:
    info = TranslationInfo(content="hello", src_lang="en", tgt_lang="hi")
    assert info.translated_text == ""
    assert info.method is TranslationMethod.NONE
    assert info.confidence is None
