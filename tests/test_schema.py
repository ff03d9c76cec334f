"""
Tests for schema validation.
"""
import pytest
import pandas as pd
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from planning.data.schema import (
    validate_required_columns,
    check_optional_columns,
    validate_schema,
    ensure_column_types,
    SchemaValidationError
)


class TestValidateRequiredColumns:
    """Tests for required column validation."""

    def test_all_columns_present(self):
        """All required columns present should return valid."""
        df = pd.DataFrame({
            "code": ["P1"],
            "name": ["Pilot"],
            "start_date": ["2024-01-01"],
            "end_date": ["2024-01-12"],
            "manager_number": [1],
        })

        is_valid, missing = validate_required_columns(df, "projects")

        assert is_valid is True
        assert missing == []

    def test_missing_columns(self):
        """Missing columns should be detected."""
        df = pd.DataFrame({"project_code": ["P1"]})

        is_valid, missing = validate_required_columns(df, "commitments")

        assert is_valid is False
        assert missing == ["employee_number", "hours_per_day"]

    def test_unknown_table(self):
        """Unknown table name should pass (no requirements)."""
        df = pd.DataFrame({"any_col": [1, 2, 3]})

        is_valid, missing = validate_required_columns(df, "unknown_table")

        assert is_valid is True
        assert missing == []


class TestValidateSchema:
    """Tests for full schema validation."""

    def test_strict_mode_raises(self):
        """Strict mode should raise on missing columns."""
        df = pd.DataFrame({"number": [1]})

        with pytest.raises(SchemaValidationError):
            validate_schema(df, "employees", strict=True)

    def test_non_strict_mode_reports(self):
        """Non-strict mode should return the result instead of raising."""
        df = pd.DataFrame({"number": [1]})

        result = validate_schema(df, "employees", strict=False)

        assert result["is_valid"] is False
        assert result["missing_required"] == ["name", "hourly_wage"]
        assert result["total_rows"] == 1
        assert result["total_columns"] == 1

    def test_optional_columns_reported(self):
        df = pd.DataFrame({"code": ["P1"]})
        assert check_optional_columns(df, "projects") == ["planning_year"]
        assert check_optional_columns(df, "employees") == []


class TestEnsureColumnTypes:
    """Tests for type coercion."""

    def test_coerces_types(self):
        df = pd.DataFrame({
            "code": [" P1 "],
            "start_date": ["2024-01-01"],
            "manager_number": ["3"],
        })

        result = ensure_column_types(df)

        assert result["code"].iloc[0] == "P1"
        assert result["start_date"].iloc[0] == date(2024, 1, 1)
        assert result["manager_number"].iloc[0] == 3

    def test_does_not_mutate_input(self):
        df = pd.DataFrame({"hourly_wage": ["20"]})
        ensure_column_types(df)
        assert df["hourly_wage"].iloc[0] == "20"

    def test_invalid_number_raises(self):
        df = pd.DataFrame({"hourly_wage": ["twenty"]})
        with pytest.raises(ValueError):
            ensure_column_types(df)
