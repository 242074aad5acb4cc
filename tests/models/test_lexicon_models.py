from __future__ import annotations

import re

import pytest

from models.lexicon_models import LanguagePairKey, Lexicon, PatternRule


def test_pair_key_parse_and_str() -> None:
    pair = LanguagePairKey.parse("en-hi")
    assert pair == LanguagePairKey("en", "hi")
    assert str(pair) == "en-hi"
    assert pair.key == "en-hi"


@pytest.mark.parametrize("value", ["en", "en-", "EN-hi", "en-hi-ne", "en_hi", ""])
def test_pair_key_parse_rejects_malformed(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid language pair key"):
        LanguagePairKey.parse(value)


def test_lexicon_preserves_declaration_order() -> None:
    lexicon = Lexicon(LanguagePairKey("en", "hi"), [("zeta", "z"), ("alpha", "a"), ("mid", "m")])
    assert list(lexicon) == ["zeta", "alpha", "mid"]
    assert len(lexicon) == 3


def test_lexicon_lookup_is_exact() -> None:
    lexicon = Lexicon(LanguagePairKey("en", "hi"), {"hello": "नमस्ते"})
    assert lexicon.lookup("hello") == "नमस्ते"
    assert lexicon.lookup("Hello") is None
    assert lexicon.lookup(" hello") is None


def test_lexicon_empty_translation_never_matches() -> None:
    lexicon = Lexicon(LanguagePairKey("en", "hi"), {"blank": ""})
    assert "blank" in lexicon
    assert lexicon.lookup("blank") is None


def test_lexicon_is_read_only() -> None:
    lexicon = Lexicon(LanguagePairKey("en", "hi"), {"hello": "नमस्ते"})
    with pytest.raises(TypeError):
        lexicon["bye"] = "बाय"  # type: ignore[index]


def test_lexicon_merged_overwrites_in_place() -> None:
    lexicon = Lexicon(LanguagePairKey("en", "hi"), {"a": "1", "b": "2"})
    merged = lexicon.merged({"a": "10", "c": "3"})
    assert list(merged.items()) == [("a", "10"), ("b", "2"), ("c", "3")]
    assert lexicon.lookup("a") == "1"


def test_pattern_rule_substitutes_trimmed_groups() -> None:
    rule = PatternRule(re.compile(r"^my name is (.+)$", re.IGNORECASE), "मेरो नाम $1 हो")
    assert rule.apply("  My name is  Sam  ") == "मेरो नाम Sam हो"
    assert rule.apply("hello") is None


def test_pattern_rule_missing_and_unknown_groups() -> None:
    rule = PatternRule(re.compile(r"^(a)(b)?$"), "[$1|$2|$3]")
    assert rule.apply("a") == "[a||$3]"
