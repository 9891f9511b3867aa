"""
Bulk analysis service - coordinates CSV parsing, sampling and the model call
"""
import logging
from typing import Optional

from src.feedback_analyzer import BulkAnalysis, FeedbackAnalyzer
from src.feedback_extractor import (
    CSVParseError,
    EmptyInputError,
    FeedbackSampler,
    parse_csv
)

logger = logging.getLogger(__name__)


class BulkAnalysisService:
    """Runs one CSV upload through extraction and aggregate analysis"""

    def __init__(self, analyzer: FeedbackAnalyzer, sampler: Optional[FeedbackSampler] = None):
        self.analyzer = analyzer
        self.sampler = sampler or FeedbackSampler()

    def run(self, csv_data: Optional[str]) -> BulkAnalysis:
        """
        Analyze the feedback contained in raw CSV text

        Raises:
            FeedbackExtractionError subclasses for unusable input
            AnalysisError subclasses when the model call or reply fails
        """
        if not csv_data or not csv_data.strip():
            raise EmptyInputError(
                "No CSV data provided",
                "Send the file contents as the csvData field of the request body."
            )

        # NUL bytes mean a binary upload (xlsx, zip) rather than delimited text
        if "\x00" in csv_data:
            logger.warning("Rejected CSV upload containing binary data")
            raise CSVParseError(
                "Failed to parse CSV file",
                "Please ensure the file is properly formatted as a comma-separated values file."
            )

        table = parse_csv(csv_data)
        sample = self.sampler.build_sample(table)
        return self.analyzer.analyze_bulk(sample)
