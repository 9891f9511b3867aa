"""Business logic services"""
from .bulk_analysis import BulkAnalysisService

__all__ = [
    "BulkAnalysisService"
]
