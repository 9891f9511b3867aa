"""
Pydantic models for analysis results

AnalysisResult is a tagged union of SingleAnalysis and BulkAnalysis, selected
by AnalysisKind. Field names are snake_case in Python and camelCase on the
wire; unknown keys in a model reply are dropped.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ResponseFormatError

Number = Union[int, float]


class AnalysisKind(str, Enum):
    """Which result shape a reply must decode into"""
    SINGLE = "single"
    BULK = "bulk"


class _WireModel(BaseModel):
    class Config:
        populate_by_name = True
        extra = "ignore"


class SentimentBreakdown(_WireModel):
    """Overall label plus percentage split"""
    overall: str = Field(..., description="Positive, Negative, Mixed or Neutral")
    positive: Optional[Number] = None
    negative: Optional[Number] = None
    neutral: Optional[Number] = None


class Issue(_WireModel):
    category: str
    description: Optional[str] = None
    priority: Optional[str] = None
    severity: Optional[str] = None


class IssueCategory(Issue):
    frequency: Optional[Number] = None


class PriorityBreakdown(_WireModel):
    high: Optional[int] = None
    medium: Optional[int] = None
    low: Optional[int] = None


class CSVStructure(_WireModel):
    explanation: str
    detected_columns: List[int] = Field(default_factory=list, alias="detectedColumns")
    detected_column_names: List[str] = Field(default_factory=list, alias="detectedColumnNames")
    headers: List[str] = Field(default_factory=list)


class Metadata(_WireModel):
    """Counts and provenance attached to bulk results"""
    total_entries: int = Field(..., alias="totalEntries", description="Valid feedback entries found")
    total_rows_in_csv: int = Field(..., alias="totalRowsInCSV", description="Data rows, header excluded")
    sample_analyzed: int = Field(..., alias="sampleAnalyzed", description="Entries sent to the model")
    csv_structure: CSVStructure = Field(..., alias="csvStructure")
    processing_date: str = Field(..., alias="processingDate", description="UTC ISO-8601 timestamp")
    analysis_scope: str = Field(..., alias="analysisScope")


class SingleAnalysis(_WireModel):
    """Analysis of one piece of feedback"""
    sentiment: SentimentBreakdown
    issues: List[Issue] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list, alias="actionItems")
    summary: str


class BulkAnalysis(_WireModel):
    """Aggregate analysis of a feedback sample"""
    aggregate_sentiment: SentimentBreakdown = Field(..., alias="aggregateSentiment")
    issue_categories: List[IssueCategory] = Field(default_factory=list, alias="issueCategories")
    strategic_recommendations: List[str] = Field(default_factory=list, alias="strategicRecommendations")
    executive_summary: str = Field(..., alias="executiveSummary")
    priority_breakdown: Optional[PriorityBreakdown] = Field(None, alias="priorityBreakdown")
    metadata: Optional[Metadata] = None


AnalysisResult = Union[SingleAnalysis, BulkAnalysis]

_MODELS = {
    AnalysisKind.SINGLE: SingleAnalysis,
    AnalysisKind.BULK: BulkAnalysis,
}


def decode_analysis(kind: AnalysisKind, payload: Any, raw_response: str = "") -> AnalysisResult:
    """
    Validate a decoded reply against the result shape for ``kind``

    Raises:
        ResponseFormatError: payload does not match the shape
    """
    model = _MODELS[kind]
    data = payload
    if kind is AnalysisKind.BULK and isinstance(payload, dict):
        # metadata is always computed server-side
        data = {key: value for key, value in payload.items() if key != "metadata"}

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ResponseFormatError(
            f"Response does not match the {kind.value} analysis shape: {e.error_count()} error(s)",
            raw_response
        )
