"""
Main API module defining the FastAPI application and its endpoints.
"""

import csv
import logging
from io import StringIO
from typing import List

from fastapi import FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from sentiment_api.analytics import pareto_analysis, summarize_sentiment
from sentiment_api.models.analysis import KeywordFrequency, ScoreDisplay
from sentiment_api.models.response import ParetoRequest, SurveyResponse, SurveyResponseList
from sentiment_api.nlp import color_for, label_for, sentiment_analyzer
from sentiment_api.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Rate limiter configuration
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

RESPONSE_COLUMNS = ["response", "responsetext", "comment", "content", "text", "body"]

app = FastAPI(title="Employee Sentiment API", debug=settings.debug)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def score_display(score: float) -> ScoreDisplay:
    return ScoreDisplay(score=score, label=label_for(score), color=color_for(score))


@app.get("/")
@limiter.limit(settings.default_rate_limit)
async def root(request: Request):
    """
    Root endpoint returning a simple greeting message.
    """
    return {"message": "Employee Sentiment API"}


@app.post("/sentiment/")
@limiter.limit(settings.analyze_rate_limit)
async def analyze_response(request: Request, response: SurveyResponse):
    """
    Endpoint to analyse the sentiment of a single survey response.
    """

    result = sentiment_analyzer.analyze(response.content)

    return {
        "response": response.content,
        "sentiment": result.as_dict(),
        "display": score_display(result.score),
    }


@app.post("/sentiment/summary/")
@limiter.limit(settings.analyze_rate_limit)
async def summarize_responses(request: Request, response_list: SurveyResponseList):
    """
    Endpoint returning the sentiment distribution of a set of responses.

    Entries without text (multiple-choice answers) are ignored.
    """

    summary = summarize_sentiment(response_list.responses, sample_size=settings.sample_size)
    logger.info("Summarized %d of %d responses", summary.total_responses, len(response_list.responses))

    return summary


@app.get("/sentiment/scale/", response_model=ScoreDisplay)
@limiter.limit(settings.default_rate_limit)
async def sentiment_scale(
    request: Request,
    score: float = Query(..., allow_inf_nan=False, description="Sentiment score"),
):
    """
    Endpoint mapping a score to its display label and color.
    """
    return score_display(score)


@app.post("/pareto/", response_model=List[KeywordFrequency])
@limiter.limit(settings.analyze_rate_limit)
async def keyword_pareto(request: Request, pareto_request: ParetoRequest):
    """
    Endpoint returning keyword frequencies ranked for a Pareto chart.
    """

    keywords = pareto_request.keywords or settings.pareto_keywords
    return pareto_analysis(pareto_request.responses, keywords)


@app.post("/upload/")
@limiter.limit(settings.upload_rate_limit)
async def analyze_csv(request: Request, file: UploadFile = File(...)):
    """
    Endpoint to analyze survey responses from a CSV file.
    """

    if not file.filename or not file.filename.endswith(".csv"):
        logger.warning("Rejected upload with filename %r", file.filename)
        raise HTTPException(
            status_code=400, detail="Invalid file type. Please upload a CSV file."
        )

    content = await file.read()

    try:
        text_content = content.decode("utf-8")
        csv_file = StringIO(text_content)
        reader = csv.DictReader(csv_file)

        fieldnames = reader.fieldnames

        if not fieldnames:
            raise HTTPException(status_code=400, detail="Empty CSV file")

        response_field = next(
            (name for name in fieldnames if name.lower() in RESPONSE_COLUMNS),
            None,
        )

        if not response_field:
            response_field = fieldnames[0]

        texts = []
        results = []

        for row in reader:
            response_text = (row.get(response_field) or "").strip()

            if response_text:
                texts.append(response_text)
                results.append(
                    {
                        "response": response_text,
                        "sentiment": sentiment_analyzer.analyze(response_text).as_dict(),
                    }
                )

    except HTTPException:
        raise
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=400, detail="Invalid file encoding. Please use UTF-8."
        )
    except csv.Error as e:
        raise HTTPException(status_code=400, detail=f"Error parsing CSV: {str(e)}")

    logger.info("Analyzed %d responses from %s", len(results), file.filename)

    return {
        "filename": file.filename,
        "results": results,
        "summary": summarize_sentiment(texts, sample_size=settings.sample_size),
        "status": "CSV analyzed successfully",
    }
