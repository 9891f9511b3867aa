"""Pydantic models for API requests and responses"""
from .requests import (
    AnalyzeRequest,
    BulkAnalyzeRequest,
    ErrorResponse,
    HealthResponse,
    ReadinessResponse
)

__all__ = [
    "AnalyzeRequest",
    "BulkAnalyzeRequest",
    "ErrorResponse",
    "HealthResponse",
    "ReadinessResponse"
]
