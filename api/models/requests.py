"""
Pydantic models for API requests and non-analysis responses
"""
from typing import Optional, List, Dict
from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Body of POST /api/analyze"""
    feedback: Optional[str] = Field(None, description="Customer feedback text")


class BulkAnalyzeRequest(BaseModel):
    """Body of POST /api/analyze-bulk"""
    csv_data: Optional[str] = Field(None, alias="csvData", description="Raw CSV file contents, header row first")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error body; which optional fields are set depends on the failure"""
    error: str = Field(..., description="Short error title")
    details: Optional[str] = Field(None, description="Actionable detail or upstream response body")
    message: Optional[str] = Field(None, description="Underlying exception message")
    raw_response: Optional[str] = Field(None, alias="rawResponse", description="Excerpt of the model reply")


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    endpoints: List[str]
    version: str
    uptime_seconds: float


class ReadinessResponse(BaseModel):
    ready: bool
    checks: Dict[str, bool]
