"""
Stage 1: Feedback Extractor
Turns raw CSV text into a bounded sample of free-text feedback entries
"""

from .csv_parser import parse_csv
from .column_detector import detect_feedback_columns, describe_columns, normalize_header
from .sampler import FeedbackSampler, FeedbackSample
from .exceptions import (
    FeedbackExtractionError,
    EmptyInputError,
    CSVParseError,
    InsufficientDataError,
    NoValidFeedbackError
)

__all__ = [
    'parse_csv',
    'detect_feedback_columns',
    'describe_columns',
    'normalize_header',
    'FeedbackSampler',
    'FeedbackSample',
    'FeedbackExtractionError',
    'EmptyInputError',
    'CSVParseError',
    'InsufficientDataError',
    'NoValidFeedbackError'
]
