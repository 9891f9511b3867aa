"""
Custom exceptions for Feedback Extractor

Every exception here is a data-quality problem with the caller's input and
carries a human-readable ``details`` string for the API response.
"""


class FeedbackExtractionError(Exception):
    """Base exception for extraction errors"""

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.message = message
        self.details = details


class EmptyInputError(FeedbackExtractionError):
    """Raised when no CSV data was provided"""
    pass


class CSVParseError(FeedbackExtractionError):
    """Raised when the CSV text cannot be tokenized"""
    pass


class InsufficientDataError(FeedbackExtractionError):
    """Raised when the CSV has no data row after the header"""
    pass


class NoValidFeedbackError(FeedbackExtractionError):
    """Raised when no scanned row yields a usable feedback entry"""

    def __init__(self, message: str, details: str = "", checked_columns=None):
        super().__init__(message, details)
        self.checked_columns = list(checked_columns or [])
