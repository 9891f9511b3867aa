"""
Feedback analysis endpoints
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from src.feedback_analyzer import (
    BulkAnalysis,
    FeedbackAnalyzer,
    InvalidFeedbackError,
    ResponseFormatError,
    SingleAnalysis,
    UpstreamAPIError
)
from src.feedback_extractor import FeedbackExtractionError

from ..dependencies import get_analyzer, get_bulk_service
from ..models.requests import AnalyzeRequest, BulkAnalyzeRequest, ErrorResponse
from ..services.bulk_analysis import BulkAnalysisService

logger = logging.getLogger(__name__)
router = APIRouter()

BULK_FAILURE_DETAILS = (
    "This could be due to API limits, large file size, or malformed data. "
    "Try with a smaller file or check your CSV format."
)


@router.post(
    "/analyze",
    response_model=SingleAnalysis,
    responses={
        400: {"model": ErrorResponse, "description": "No feedback provided"},
        500: {"model": ErrorResponse, "description": "Unparseable model reply or server error"},
    },
)
def analyze_feedback(
    request: AnalyzeRequest,
    analyzer: FeedbackAnalyzer = Depends(get_analyzer)
):
    """
    Analyze a single piece of customer feedback.

    Returns sentiment split, issues, action items and a one-line summary.
    Upstream API failures are passed through with their status code.
    """
    try:
        return analyzer.analyze_single(request.feedback)
    except InvalidFeedbackError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except UpstreamAPIError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"error": str(e), "details": e.body}
        )
    except ResponseFormatError as e:
        logger.error(f"Unparseable model reply: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Invalid response format from Claude API",
                "rawResponse": e.raw_response
            }
        )


@router.post(
    "/analyze-bulk",
    response_model=BulkAnalysis,
    responses={
        400: {"model": ErrorResponse, "description": "Missing, malformed or insufficient CSV data"},
        500: {"model": ErrorResponse, "description": "Bulk analysis failed"},
    },
)
def analyze_bulk(
    request: BulkAnalyzeRequest,
    service: BulkAnalysisService = Depends(get_bulk_service)
):
    """
    Analyze the feedback columns of an uploaded CSV as a whole.

    Feedback columns are detected from the header row. The first 50 data
    rows are scanned and at most 25 entries are sent to the model; the
    attached metadata reports the true counts.
    """
    logger.info("Starting bulk analysis...")

    try:
        return service.run(request.csv_data)
    except FeedbackExtractionError as e:
        logger.warning(f"Rejected CSV: {e.message}")
        return JSONResponse(
            status_code=400,
            content={"error": e.message, "details": e.details}
        )
    except Exception as e:
        logger.error(f"Bulk Analysis Error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Bulk analysis failed",
                "message": str(e),
                "details": BULK_FAILURE_DETAILS
            }
        )
