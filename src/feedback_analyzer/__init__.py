"""
Stage 2: Feedback Analyzer - LLM-based sentiment and issue analysis

Sends single feedback or a bulk sample to Claude and decodes the JSON reply
into SingleAnalysis / BulkAnalysis results.
"""

from .llm_client import LLMClient
from .analyzer import FeedbackAnalyzer, build_metadata, format_timestamp
from .json_extraction import extract_json_object, find_json_span
from .schemas import (
    AnalysisKind,
    AnalysisResult,
    SingleAnalysis,
    BulkAnalysis,
    Metadata,
    decode_analysis
)
from .exceptions import (
    AnalysisError,
    InvalidFeedbackError,
    LLMClientError,
    UpstreamAPIError,
    ResponseFormatError
)

__all__ = [
    'LLMClient',
    'FeedbackAnalyzer',
    'build_metadata',
    'format_timestamp',
    'extract_json_object',
    'find_json_span',
    'AnalysisKind',
    'AnalysisResult',
    'SingleAnalysis',
    'BulkAnalysis',
    'Metadata',
    'decode_analysis',
    'AnalysisError',
    'InvalidFeedbackError',
    'LLMClientError',
    'UpstreamAPIError',
    'ResponseFormatError'
]
