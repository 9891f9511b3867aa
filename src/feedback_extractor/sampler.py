"""
Feedback sampling for LLM consumption
Strategy: scan the first 50 data rows, keep substantial values from the
detected columns, send at most 25 entries to the model
"""

import re
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .column_detector import detect_feedback_columns, describe_columns
from .config import (
    MAX_SCAN_ROWS,
    MAX_SAMPLE_ENTRIES,
    MIN_FEEDBACK_LENGTH,
    ENTRY_SEPARATOR,
    SAMPLE_SEPARATOR,
)
from .exceptions import InsufficientDataError, NoValidFeedbackError

logger = logging.getLogger(__name__)

_QUOTES_AND_BREAKS = re.compile(r'["\r\n]+')


@dataclass
class FeedbackSample:
    """Bounded feedback sample built from one parsed CSV"""
    headers: List[str]
    columns: List[int]
    column_names: List[str]
    entries: List[str]
    total_rows: int
    rows_scanned: int
    sample_size: int
    sample_text: str
    sampled_entries: List[str] = field(default_factory=list)

    @property
    def total_entries(self) -> int:
        return len(self.entries)


class FeedbackSampler:
    """Extracts feedback entries from a parsed CSV and bounds what reaches the model"""

    def __init__(
        self,
        max_scan_rows: int = MAX_SCAN_ROWS,
        max_sample_entries: int = MAX_SAMPLE_ENTRIES,
        min_length: int = MIN_FEEDBACK_LENGTH
    ):
        """
        Args:
            max_scan_rows: Data rows examined at all; later rows are ignored
            max_sample_entries: Entries joined into the text sent to the model
            min_length: Values with this many characters or fewer are dropped
        """
        self.max_scan_rows = max_scan_rows
        self.max_sample_entries = max_sample_entries
        self.min_length = min_length

    def extract_entries(self, data_rows: Sequence[Sequence[str]], columns: Sequence[int]) -> List[str]:
        """
        Build one entry per scanned row from the selected columns

        Args:
            data_rows: Parsed rows without the header
            columns: Column indices to read from each row

        Returns:
            Entries in row order; rows with no substantial value are skipped
        """
        entries = []

        for row in data_rows[:self.max_scan_rows]:
            values = [row[index] if index < len(row) else '' for index in columns]
            parts = [
                _QUOTES_AND_BREAKS.sub(' ', value).strip()
                for value in values
                if len(value) > self.min_length
            ]
            if parts:
                entries.append(ENTRY_SEPARATOR.join(parts))

        return entries

    def build_sample(self, table: Sequence[Sequence[str]]) -> FeedbackSample:
        """
        Detect feedback columns on the header row and build the sample

        Args:
            table: Parsed CSV, header row first

        Returns:
            FeedbackSample with true counts and the capped sample text

        Raises:
            InsufficientDataError: fewer than two rows
            NoValidFeedbackError: no scanned row produced an entry
        """
        if len(table) < 2:
            raise InsufficientDataError(
                "CSV file appears to be empty or has insufficient data",
                "Please ensure your CSV has at least a header row and one data row."
            )

        headers = list(table[0])
        data_rows = table[1:]
        columns = detect_feedback_columns(headers)
        column_names = describe_columns(headers, columns)

        logger.info(f"Detected {len(columns)} feedback columns: {column_names}")

        entries = self.extract_entries(data_rows, columns)

        if not entries:
            raise NoValidFeedbackError(
                "No valid feedback found in CSV",
                f"Checked columns: {', '.join(column_names)}. Ensure these columns contain "
                f"substantial text content (more than {self.min_length} characters).",
                checked_columns=column_names
            )

        sampled = entries[:self.max_sample_entries]
        rows_scanned = min(len(data_rows), self.max_scan_rows)

        logger.info(
            f"Extracted {len(entries)} valid feedback entries from {rows_scanned} scanned rows "
            f"({len(data_rows)} total), sending {len(sampled)}"
        )

        return FeedbackSample(
            headers=headers,
            columns=columns,
            column_names=column_names,
            entries=entries,
            total_rows=len(data_rows),
            rows_scanned=rows_scanned,
            sample_size=len(sampled),
            sample_text=SAMPLE_SEPARATOR.join(sampled),
            sampled_entries=sampled
        )
