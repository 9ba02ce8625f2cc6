"""
Tests for schema validation.
"""

import pytest
from jobboard.schema import validate_job_new, validate_job_update


class TestValidateJobNew:
    """Test new job validation."""

    def test_valid_job(self, new_job):
        """Valid job should have no errors."""
        assert validate_job_new(new_job) == []

    def test_valid_minimal(self):
        """Salary and equity may be omitted."""
        assert validate_job_new({"title": "Dev", "companyHandle": "c1"}) == []

    def test_missing_required_field(self):
        """Missing required field should error."""
        errors = validate_job_new({"title": "Dev"})
        assert any("companyHandle" in err for err in errors)

    def test_empty_title(self):
        """Blank title should error."""
        errors = validate_job_new({"title": "   ", "companyHandle": "c1"})
        assert any("title" in err for err in errors)

    def test_negative_salary(self):
        errors = validate_job_new({"title": "Dev", "companyHandle": "c1", "salary": -5})
        assert any("salary" in err for err in errors)

    def test_non_integer_salary(self):
        errors = validate_job_new({"title": "Dev", "companyHandle": "c1", "salary": "lots"})
        assert any("salary" in err for err in errors)

    @pytest.mark.parametrize("equity", ["0", "0.5", ".05", "1", "1.0"])
    def test_valid_equity(self, equity):
        assert validate_job_new({"title": "Dev", "companyHandle": "c1", "equity": equity}) == []

    @pytest.mark.parametrize("equity", ["1.5", "abc", "-0.1", 0.5])
    def test_invalid_equity(self, equity):
        errors = validate_job_new({"title": "Dev", "companyHandle": "c1", "equity": equity})
        assert any("equity" in err for err in errors)

    def test_unknown_field(self):
        errors = validate_job_new({"title": "Dev", "companyHandle": "c1", "id": 3})
        assert errors == ["Unknown field: id"]


class TestValidateJobUpdate:
    """Test job update validation."""

    def test_valid_update(self):
        assert validate_job_update({"salary": 500}) == []

    def test_empty_update(self):
        assert validate_job_update({}) == ["No fields to update"]

    @pytest.mark.parametrize("field", ["id", "companyHandle"])
    def test_immutable_fields(self, field):
        errors = validate_job_update({field: "x"})
        assert errors == [f"Field '{field}' cannot be updated"]

    def test_field_rules_apply(self):
        errors = validate_job_update({"title": "", "equity": "2"})
        assert len(errors) == 2
