"""
NLP module for lexicon-based sentiment analysis of survey responses.

Scores are the sum of word polarities (+1/-1, doubled after an intensifier,
flipped after a negator) divided by the number of words with two or more
characters. The analyzer is pure: it keeps no state between calls and never
raises, so one instance can be shared by every request handler.
"""

import re
from typing import Any, List

from sentiment_api.lexicon import DEFAULT_LEXICON, Lexicon
from sentiment_api.models.analysis import SentimentDetails, SentimentResult

# Whitespace as understood by the dashboards' regex engine: no \x1c-\x1f or
# \x85, but \ufeff is included
_SPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_PUNCTUATION = re.compile(r"[^A-Za-z0-9_" + _SPACE + r"]")
_WHITESPACE = re.compile(r"[" + _SPACE + r"]+")

VERY_POSITIVE_THRESHOLD = 0.12
POSITIVE_THRESHOLD = 0.03
NEGATIVE_THRESHOLD = -0.03
VERY_NEGATIVE_THRESHOLD = -0.12

VERY_POSITIVE_COLOR = "#4CAF50"
POSITIVE_COLOR = "#8BC34A"
NEUTRAL_COLOR = "#9E9E9E"
NEGATIVE_COLOR = "#FF9800"
VERY_NEGATIVE_COLOR = "#F44336"

# Buckets, most positive first
LABELS = ("very positive", "positive", "neutral", "negative", "very negative")
DISPLAY_LABELS = ("Very Positive", "Positive", "Neutral", "Negative", "Very Negative")
COLORS = (
    VERY_POSITIVE_COLOR,
    POSITIVE_COLOR,
    NEUTRAL_COLOR,
    NEGATIVE_COLOR,
    VERY_NEGATIVE_COLOR,
)


def tokenize(text: str) -> List[str]:
    """
    Lowercase, drop punctuation and split on whitespace.

    Leading or trailing whitespace produces empty tokens; they are kept so
    that token positions match the raw split.
    """
    return _WHITESPACE.split(_PUNCTUATION.sub("", text.lower()))


def bucket(score: float) -> int:
    """
    Index of the bucket a score falls in.

    Comparisons are strict, so a score sitting exactly on a threshold lands
    in the bucket closer to neutral.
    """
    if score > VERY_POSITIVE_THRESHOLD:
        return 0
    if score > POSITIVE_THRESHOLD:
        return 1
    if score < VERY_NEGATIVE_THRESHOLD:
        return 4
    if score < NEGATIVE_THRESHOLD:
        return 3
    return 2


def classify(score: float) -> str:
    """Lowercase label stored with an analysis result."""
    return LABELS[bucket(score)]


def color_for(score: float) -> str:
    """Hex color used by dashboards for a score."""
    return COLORS[bucket(score)]


def label_for(score: float) -> str:
    """Capitalized display label for a score."""
    return DISPLAY_LABELS[bucket(score)]


class SentimentAnalyzer:
    """Scores free text against a fixed lexicon."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def analyze(self, text: Any) -> SentimentResult:
        """
        Analyze the sentiment of a response.

        Anything that is not a non-blank string gets a neutral result with
        zero confidence and no details.
        """
        if not isinstance(text, str) or not text or _WHITESPACE.fullmatch(text):
            return SentimentResult(score=0.0, label="neutral", confidence=0.0)

        words = tokenize(text)
        lexicon = self.lexicon

        score = 0
        positive_count = 0
        negative_count = 0
        word_count = 0

        for i, word in enumerate(words):
            if len(word) < 2:
                continue

            word_count += 1

            # Modifiers are read from the raw previous token, even a skipped one
            previous = words[i - 1] if i > 0 else None
            is_negated = previous in lexicon.negators
            multiplier = 2 if previous in lexicon.intensifiers else 1

            if word in lexicon.positive_words:
                if is_negated:
                    score -= multiplier
                    negative_count += 1
                else:
                    score += multiplier
                    positive_count += 1
            elif word in lexicon.negative_words:
                if is_negated:
                    score += multiplier
                    positive_count += 1
                else:
                    score -= multiplier
                    negative_count += 1

        # Not clamped: intensified words can push the ratio past 1
        normalized_score = score / word_count if word_count > 0 else 0.0
        confidence = (positive_count + negative_count) / word_count if word_count > 0 else 0.0

        return SentimentResult(
            score=normalized_score,
            label=classify(normalized_score),
            confidence=confidence,
            details=SentimentDetails(
                positive_words=positive_count,
                negative_words=negative_count,
                total_words=word_count,
            ),
        )


sentiment_analyzer = SentimentAnalyzer()


def analyze(text: Any) -> SentimentResult:
    """Analyze ``text`` with the default lexicon."""
    return sentiment_analyzer.analyze(text)
