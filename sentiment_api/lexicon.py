"""
Word lists used by the sentiment analyzer.

All tokens are lowercase; lookups happen after the input text has been
lowercased and stripped of punctuation.
"""

from dataclasses import dataclass
from typing import FrozenSet

POSITIVE_WORDS = frozenset(
    {
        # General
        "good", "great", "excellent", "amazing", "awesome", "fantastic", "wonderful",
        "happy", "pleased", "satisfied", "enjoy", "like", "love", "best", "better",
        "improved", "improvement", "helpful", "positive", "success", "successful",
        "well", "benefit", "benefits", "effective", "efficiently", "recommend",
        "appreciated", "appreciate", "thank", "thanks", "grateful", "glad", "perfect",
        "interesting", "innovative", "impressive", "exceptional", "outstanding",
        "superior", "favorable", "convenient", "comfortable", "excited", "exciting",
        "enthusiasm", "enthusiastic", "satisfaction", "satisfying", "proud", "pride",
        "delight", "delighted", "delightful", "pleasure", "pleasant", "impressed",
        # Workplace
        "productive", "efficient", "organized", "motivated", "inspiring", "supportive",
        "collaborative", "teamwork", "leadership", "mentoring", "growth", "opportunity",
        "opportunities", "advancement", "promotion", "bonus", "raise", "recognition",
        "acknowledged", "praised", "rewarded", "valued", "respected", "inclusive",
        "diverse", "flexible", "balance", "fair", "transparent", "honest", "integrity",
        "trust", "reliable", "dependable", "professional", "expertise", "skilled",
        "competent", "knowledgeable", "learning", "development", "training", "progress",
        "achievement", "accomplished", "succeed", "succeeding", "succeeded", "win",
        "winning", "won", "achieve", "achieved", "achieving", "excel", "excelled",
        "excelling", "thrive", "thriving", "thrived", "prosper", "prospering",
        "prospered",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        # General
        "bad", "poor", "terrible", "horrible", "awful", "disappointing", "disappointed",
        "frustrating", "frustrated", "annoying", "annoyed", "unhappy", "sad", "hate",
        "dislike", "worst", "worse", "difficult", "hard", "problem", "issue", "concern",
        "negative", "fail", "failure", "failed", "inadequate", "insufficient",
        "ineffective", "inefficient", "slow", "confusing", "confused", "complicated",
        "complex", "boring", "tired", "exhausted", "stressful", "stress", "painful",
        "pain", "trouble", "troublesome", "inconvenient", "uncomfortable",
        "dissatisfied", "dissatisfaction", "unpleasant", "unfavorable", "unfortunate",
        "unprofessional", "unreliable", "unreasonable", "unacceptable",
        "unsatisfactory", "unsatisfied", "useless", "worthless", "waste", "wasted",
        "wasting", "mediocre", "subpar",
        # Workplace
        "overworked", "underpaid", "micromanage", "micromanaged", "micromanaging",
        "unfair", "biased", "discrimination", "harassment", "bullying", "toxic",
        "hostile", "overwhelming", "burnout", "burnt", "understaffed", "turnover",
        "quit", "quitting", "resign", "resigning", "resigned", "leave", "leaving",
        "left", "abandon", "abandoning", "abandoned", "ignore", "ignored", "ignoring",
        "neglect", "neglected", "neglecting", "mismanage", "mismanaged", "mismanaging",
        "disorganized", "chaotic", "unclear", "vague", "ambiguous", "miscommunication",
        "conflict", "argument", "disagreement", "dispute", "tension", "pressure",
        "deadline", "overdue", "late", "delay", "delayed", "postpone", "postponed",
        "cancel", "canceled", "cancellation", "cutback", "layoff", "fired",
        "termination", "demoted", "demotion", "undervalued", "underappreciated",
        "overlooked",
    }
)

INTENSIFIERS = frozenset(
    {
        "very", "really", "extremely", "absolutely", "completely", "highly", "greatly",
        "particularly", "especially", "exceptionally", "totally", "utterly", "quite",
        "remarkably", "extraordinarily", "incredibly", "decidedly", "deeply",
    }
)

# Contracted forms lose their apostrophe before lookup, so they never match.
# They stay listed to keep scores identical to the existing dashboards.
NEGATORS = frozenset(
    {
        "not", "no", "never", "neither", "nor", "none", "nobody", "nothing", "nowhere",
        "hardly", "scarcely", "barely", "doesn't", "don't", "didn't", "isn't",
        "aren't", "wasn't", "weren't", "hasn't", "haven't", "hadn't", "won't",
        "wouldn't", "can't", "cannot", "couldn't", "shouldn't",
    }
)


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of the four token sets."""

    positive_words: FrozenSet[str] = POSITIVE_WORDS
    negative_words: FrozenSet[str] = NEGATIVE_WORDS
    intensifiers: FrozenSet[str] = INTENSIFIERS
    negators: FrozenSet[str] = NEGATORS


DEFAULT_LEXICON = Lexicon()
