import pytest

from api.services.bulk_analysis import BulkAnalysisService
from src.feedback_analyzer import FeedbackAnalyzer
from src.feedback_extractor import (
    CSVParseError,
    EmptyInputError,
    FeedbackSampler,
    NoValidFeedbackError,
)

from conftest import BULK_REPLY, FakeLLMClient, wrap_in_prose


def _service(fake, sampler=None):
    return BulkAnalysisService(FeedbackAnalyzer(fake), sampler)


@pytest.mark.parametrize("csv_data", [None, "", " \r\n "])
def test_empty_csv_is_rejected(csv_data):
    with pytest.raises(EmptyInputError):
        _service(FakeLLMClient()).run(csv_data)


def test_binary_data_is_rejected():
    with pytest.raises(CSVParseError):
        _service(FakeLLMClient()).run("id,feedback\n1,\x00\x00")


def test_run_falls_back_to_first_column():
    fake = FakeLLMClient(reply=wrap_in_prose(BULK_REPLY))
    csv_data = "Body,Score\nLoved the onboarding flow,5\nSupport never answered,1"

    result = _service(fake).run(csv_data)

    assert result.metadata.csv_structure.detected_columns == [0]
    assert result.metadata.total_entries == 2
    assert "Loved the onboarding flow\n\n---FEEDBACK---\n\nSupport never answered" in fake.calls[0]["prompt"]


def test_zero_entries_never_reach_the_model():
    fake = FakeLLMClient(reply=wrap_in_prose(BULK_REPLY))
    with pytest.raises(NoValidFeedbackError):
        _service(fake, FeedbackSampler(min_length=100)).run("feedback\nshort but not that short")
    assert fake.calls == []
