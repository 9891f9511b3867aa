"""
Custom exceptions for Feedback Analyzer
"""

# Longest excerpt of a model reply carried in a ResponseFormatError
RAW_EXCERPT_LIMIT = 500


class AnalysisError(Exception):
    """Base exception for analysis errors"""
    pass


class InvalidFeedbackError(AnalysisError):
    """Raised when the feedback to analyze is missing or blank"""
    pass


class LLMClientError(AnalysisError):
    """Raised when the model API cannot be reached"""
    pass


class UpstreamAPIError(AnalysisError):
    """Raised when the model API answers with a non-success status"""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Claude API Error: {status_code}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(AnalysisError):
    """Raised when the model reply holds no usable JSON analysis"""

    def __init__(self, message: str, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = (raw_response or "")[:RAW_EXCERPT_LIMIT]
