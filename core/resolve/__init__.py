"""Dictionary resolution: segmentation, sentence templates and the resolution engine."""

from core.resolve.engine import NO_DICTIONARY_MARKER, Resolution, ResolutionEngine, ResolutionRoute
from core.resolve.patterns import DEFAULT_PATTERN_RULES, PatternMatcher
from core.resolve.segmenter import Segmenter, SpanKind

__all__: list[str] = [
    "DEFAULT_PATTERN_RULES",
    "NO_DICTIONARY_MARKER",
    "PatternMatcher",
    "Resolution",
    "ResolutionEngine",
    "ResolutionRoute",
    "Segmenter",
    "SpanKind",
]
