"""
Schema and score band tests.

Run with: pytest tests/test_schemas.py -v
"""
import pytest
from pydantic import ValidationError as PydanticValidationError

from schemas import ScoreBand, score_band


@pytest.mark.parametrize("score,band", [
    (100, ScoreBand.HIGH),
    (70, ScoreBand.HIGH),
    (69, ScoreBand.MEDIUM),
    (40, ScoreBand.MEDIUM),
    (39, ScoreBand.LOW),
    (0, ScoreBand.LOW),
])
def test_score_band_boundaries(score, band):
    assert score_band(score) == band


def test_score_below_70_is_never_high():
    assert all(score_band(s) != ScoreBand.HIGH for s in range(0, 70))


def test_analysis_to_wire_uses_camel_case(analysis, analysis_payload):
    assert analysis.to_wire() == analysis_payload


def test_analysis_is_immutable(analysis):
    with pytest.raises(PydanticValidationError):
        analysis.match_score = 10


def test_analysis_band(analysis):
    assert analysis.band == ScoreBand.HIGH
