"""
API models for survey responses.
"""

from typing import List, Optional

from pydantic import BaseModel


class SurveyResponse(BaseModel):
    """Model representing a single free-text survey response."""

    content: Optional[str] = None


class SurveyResponseList(BaseModel):
    """Model representing the responses to summarize."""

    responses: List[Optional[str]]


class ParetoRequest(BaseModel):
    """Responses to scan and, optionally, the keywords to count."""

    responses: List[Optional[str]]
    keywords: Optional[List[str]] = None
