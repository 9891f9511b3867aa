"""
FastAPI dependencies - request-scoped access to settings and services
"""
from fastapi import Depends, Request

from src.feedback_analyzer import FeedbackAnalyzer, LLMClient
from src.feedback_extractor import FeedbackSampler

from .config import Settings
from .services.bulk_analysis import BulkAnalysisService


def get_settings(request: Request) -> Settings:
    """Settings built once by create_app()"""
    return request.app.state.settings


def get_llm_client(settings: Settings = Depends(get_settings)) -> LLMClient:
    return LLMClient(
        api_key=settings.CLAUDE_API_KEY,
        model=settings.LLM_MODEL,
        endpoint=settings.ANTHROPIC_API_URL,
        api_version=settings.ANTHROPIC_VERSION,
        timeout=settings.LLM_TIMEOUT_SECONDS
    )


def get_analyzer(
    client: LLMClient = Depends(get_llm_client),
    settings: Settings = Depends(get_settings)
) -> FeedbackAnalyzer:
    return FeedbackAnalyzer(
        client,
        single_max_tokens=settings.SINGLE_MAX_TOKENS,
        bulk_max_tokens=settings.BULK_MAX_TOKENS
    )


def get_bulk_service(
    analyzer: FeedbackAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings)
) -> BulkAnalysisService:
    sampler = FeedbackSampler(
        max_scan_rows=settings.MAX_SCAN_ROWS,
        max_sample_entries=settings.MAX_SAMPLE_ENTRIES,
        min_length=settings.MIN_FEEDBACK_LENGTH
    )
    return BulkAnalysisService(analyzer, sampler)
