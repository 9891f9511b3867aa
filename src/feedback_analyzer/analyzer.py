"""
Feedback analyzer - prompt, call the model, extract and validate the JSON reply
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from src.feedback_extractor.sampler import FeedbackSample

from .exceptions import InvalidFeedbackError
from .json_extraction import extract_json_object
from .llm_client import LLMClient
from .prompts import build_single_prompt, build_bulk_prompt
from .schemas import (
    AnalysisKind,
    BulkAnalysis,
    CSVStructure,
    Metadata,
    SingleAnalysis,
    decode_analysis,
)

logger = logging.getLogger(__name__)

SINGLE_MAX_TOKENS = 1200
BULK_MAX_TOKENS = 2500


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_metadata(sample: FeedbackSample, processed_at: Optional[datetime] = None) -> Metadata:
    """Describe what was found in the CSV and how much of it the model saw"""
    processed_at = processed_at or datetime.now(timezone.utc)
    columns_text = ', '.join(sample.column_names)

    if sample.total_entries < sample.total_rows:
        scope = (
            f"Analyzed {sample.total_entries} entries with substantial content "
            f"from {sample.total_rows} total rows"
        )
    else:
        scope = f"Analyzed all {sample.total_entries} feedback entries"

    return Metadata(
        total_entries=sample.total_entries,
        total_rows_in_csv=sample.total_rows,
        sample_analyzed=sample.sample_size,
        csv_structure=CSVStructure(
            explanation=(
                f"Found feedback in columns: {columns_text}. Processed {sample.total_entries} "
                f"valid entries from {sample.total_rows} total rows."
            ),
            detected_columns=sample.columns,
            detected_column_names=sample.column_names,
            headers=sample.headers
        ),
        processing_date=format_timestamp(processed_at),
        analysis_scope=scope
    )


class FeedbackAnalyzer:
    """Runs single and aggregate analyses through an LLMClient"""

    def __init__(
        self,
        client: LLMClient,
        single_max_tokens: int = SINGLE_MAX_TOKENS,
        bulk_max_tokens: int = BULK_MAX_TOKENS
    ):
        self.client = client
        self.single_max_tokens = single_max_tokens
        self.bulk_max_tokens = bulk_max_tokens

    def analyze_single(self, feedback: str) -> SingleAnalysis:
        """
        Analyze one piece of feedback

        Raises:
            InvalidFeedbackError: feedback is missing or blank
            UpstreamAPIError, LLMClientError: the model call failed
            ResponseFormatError: the reply holds no valid analysis JSON
        """
        if not feedback or not feedback.strip():
            raise InvalidFeedbackError("No feedback provided")

        logger.info(f"Analyzing feedback: {feedback[:100]}...")

        reply = self.client.complete(build_single_prompt(feedback), self.single_max_tokens)
        payload = extract_json_object(reply)
        result = decode_analysis(AnalysisKind.SINGLE, payload, reply)

        logger.info("Analysis completed successfully")
        return result

    def analyze_bulk(self, sample: FeedbackSample) -> BulkAnalysis:
        """
        Analyze a feedback sample as a whole and attach its metadata

        Only ``sample.sample_text`` reaches the model; the counts in the
        prompt and metadata cover every entry found.
        """
        if not sample.entries:
            raise InvalidFeedbackError("No feedback provided")

        prompt = build_bulk_prompt(
            sample.sample_text,
            total_entries=sample.total_entries,
            sample_size=sample.sample_size,
            column_names=sample.column_names
        )

        reply = self.client.complete(prompt, self.bulk_max_tokens)
        payload = extract_json_object(reply)
        result = decode_analysis(AnalysisKind.BULK, payload, reply)
        result.metadata = build_metadata(sample)

        logger.info("Bulk analysis completed successfully")
        return result
