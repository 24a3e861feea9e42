# tests/unit/api/test_models.py — v1
"""Tests for api/models.py — request validation and option mapping."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skillsalary.api.models import BatchPredictionRequest, JobRequest, PredictionRequest


class TestPredictionRequest:
    def test_defaults(self):
        request = PredictionRequest(skills=["Python"])
        assert request.region == "US"
        assert request.experience_years == 0
        assert request.save_result is False

    def test_camel_case_input(self):
        request = PredictionRequest.model_validate(
            {"skills": ["Go"], "region": "EU", "experienceYears": 4, "saveResult": True}
        )
        assert request.experience_years == 4
        assert request.save_result is True

    def test_empty_skills_rejected(self):
        with pytest.raises(ValidationError):
            PredictionRequest(skills=[])

    def test_unknown_region_rejected(self):
        with pytest.raises(ValidationError):
            PredictionRequest(skills=["Go"], region="MARS")

    @pytest.mark.parametrize("years", [-1, 51])
    def test_experience_bounds(self, years):
        with pytest.raises(ValidationError):
            PredictionRequest(skills=["Go"], experience_years=years)


class TestBatchPredictionRequest:
    def test_requires_a_skill_set(self):
        with pytest.raises(ValidationError):
            BatchPredictionRequest(skill_sets=[])

    def test_accepts_sets(self):
        request = BatchPredictionRequest.model_validate({"skillSets": [["Go"], ["Rust"]]})
        assert request.skill_sets == [["Go"], ["Rust"]]


class TestJobRequest:
    def test_any_region_accepted(self):
        assert JobRequest(skills=["Go"], region="MARS").region == "MARS"

    def test_invalid_webhook_rejected(self):
        with pytest.raises(ValidationError):
            JobRequest(skills=["Go"], webhook_url="not a url")

    def test_to_job_options(self):
        request = JobRequest.model_validate({
            "skills": ["Go"],
            "region": "EU",
            "experienceYears": 2,
            "webhookUrl": "https://hooks.example.com/done",
            "metadata": {"userId": "u1"},
        })
        options = request.to_job_options()
        assert options.region == "EU"
        assert options.experience_years == 2
        assert options.webhook_url.startswith("https://hooks.example.com/done")
        assert options.metadata == {"userId": "u1"}

    def test_no_webhook(self):
        assert JobRequest(skills=["Go"]).to_job_options().webhook_url is None
