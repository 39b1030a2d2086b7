"""
Sentiment results and analytics response schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SentimentDetails(BaseModel):
    """Word counts behind a sentiment score."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    positive_words: int
    negative_words: int
    total_words: int


class SentimentResult(BaseModel):
    """Result of analysing a single response text."""

    model_config = ConfigDict(frozen=True)

    score: float
    label: str
    confidence: float
    details: Optional[SentimentDetails] = None

    def as_dict(self) -> Dict[str, Any]:
        """Wire form; the ``details`` key is left out when there are no details."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ScoreDisplay(BaseModel):
    """Display label and color for a score."""

    score: float
    label: str
    color: str


class SentimentSample(BaseModel):
    """A response shown as an example in a summary."""

    text: str
    score: float
    label: str
    color: str


class SentimentSummary(BaseModel):
    """Sentiment distribution over a set of responses."""

    total_responses: int
    counts: Dict[str, int]
    percentages: Dict[str, float]
    average_score: float
    average_label: str
    average_color: str
    samples: List[SentimentSample]


class KeywordFrequency(BaseModel):
    """One row of a Pareto keyword analysis."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    keyword: str
    count: int
    percentage: float
    cumulative_percentage: float
