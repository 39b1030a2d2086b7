"""
Survey analytics built on top of the sentiment analyzer.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

from sentiment_api.models.analysis import (
    KeywordFrequency,
    SentimentResult,
    SentimentSample,
    SentimentSummary,
)
from sentiment_api.nlp import LABELS, SentimentAnalyzer, color_for, label_for, sentiment_analyzer

logger = logging.getLogger(__name__)

DEFAULT_PARETO_KEYWORDS = ("good", "bad", "improve", "issue", "problem")


def _text_responses(texts: Iterable[Optional[str]]) -> List[str]:
    # Multiple-choice answers have no text and are not scored
    return [text for text in texts if isinstance(text, str) and text]


def pick_samples(scored: Sequence[SentimentSample], sample_size: int) -> List[SentimentSample]:
    """
    Spread ``sample_size`` picks over responses ordered from most positive
    to most negative.
    """
    ordered = sorted(scored, key=lambda sample: sample.score, reverse=True)
    total = len(ordered)
    to_show = min(sample_size, total)
    if to_show <= 0:
        return []

    step = total // to_show if total > to_show else 1
    return [ordered[min(i * step, total - 1)] for i in range(to_show)]


def summarize_sentiment(
    texts: Iterable[Optional[str]],
    sample_size: int = 5,
    analyzer: SentimentAnalyzer = sentiment_analyzer,
) -> SentimentSummary:
    """
    Sentiment distribution, average score and sample responses.
    """
    responses = _text_responses(texts)
    results: List[SentimentResult] = [analyzer.analyze(text) for text in responses]
    total = len(results)

    counts: Dict[str, int] = {label: 0 for label in LABELS}
    for result in results:
        counts[result.label] += 1

    percentages = {
        label: (count / total) * 100 if total > 0 else 0.0 for label, count in counts.items()
    }

    average = sum(result.score for result in results) / total if total > 0 else 0.0

    scored = [
        SentimentSample(
            text=text,
            score=result.score,
            label=label_for(result.score),
            color=color_for(result.score),
        )
        for text, result in zip(responses, results)
    ]

    logger.debug("Summarized %d text responses, average score %.4f", total, average)

    return SentimentSummary(
        total_responses=total,
        counts=counts,
        percentages=percentages,
        average_score=average,
        average_label=label_for(average),
        average_color=color_for(average),
        samples=pick_samples(scored, sample_size),
    )


def pareto_analysis(
    texts: Iterable[Optional[str]],
    keywords: Sequence[str] = DEFAULT_PARETO_KEYWORDS,
) -> List[KeywordFrequency]:
    """
    Keyword frequencies sorted from most to least frequent, with the
    cumulative percentage used to draw a Pareto chart.

    Keywords are matched case-insensitively as substrings of the response, so
    "improve" also counts "improvement".
    """
    patterns = [
        (keyword, re.compile(re.escape(keyword.lower()))) for keyword in keywords if keyword
    ]
    keyword_counts: Dict[str, int] = {}

    for text in _text_responses(texts):
        lowered = text.lower()
        for keyword, pattern in patterns:
            keyword_counts[keyword] = keyword_counts.get(keyword, 0) + len(pattern.findall(lowered))

    ranked = sorted(keyword_counts.items(), key=lambda item: item[1], reverse=True)
    total = sum(count for _, count in ranked)

    frequencies = []
    cumulative = 0.0
    for keyword, count in ranked:
        percentage = (count / total) * 100 if total > 0 else 0.0
        cumulative += percentage
        frequencies.append(
            KeywordFrequency(
                keyword=keyword,
                count=count,
                percentage=percentage,
                cumulative_percentage=cumulative,
            )
        )

    logger.debug("Pareto analysis over %d keywords, %d matches", len(frequencies), total)
    return frequencies
