#!/usr/bin/env python
"""
Validate planning table files before loading them into a registry.

Checks each table's columns and value types, then cross-checks the tables:
every project manager must be a known employee, wages must not be negative,
and commitments to unknown projects or employees are reported as dropped.

Usage:
    python scripts/validate_inputs.py
    python scripts/validate_inputs.py --data-dir /path/to/data
"""
import argparse
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from planning.config import config, TABLE_FILES
from planning.data.loader import _load_file, find_reference_issues
from planning.data.schema import validate_schema, ensure_column_types


def check_table(processed_dir: Path, table_name: str) -> dict:
    """Load one table, check its schema and coerce its column types."""
    result = {"df": None, "schema": None, "errors": []}

    df = _load_file(processed_dir / TABLE_FILES[table_name])
    if df is None:
        result["errors"].append(f"File not found: {TABLE_FILES[table_name]}.(parquet|csv)")
        return result

    result["schema"] = validate_schema(df, table_name, strict=False)
    if not result["schema"]["is_valid"]:
        return result

    try:
        result["df"] = ensure_column_types(df)
    except ValueError as e:
        result["errors"].append(f"Type coercion failed: {e}")

    return result


def main():
    parser = argparse.ArgumentParser(description="Validate planning table files")
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Override data directory"
    )

    args = parser.parse_args()

    data_dir = Path(args.data_dir) if args.data_dir else config.data_dir
    processed_dir = data_dir / "processed"

    print("=" * 60)
    print("Planning Table Validation")
    print("=" * 60)
    print(f"Source directory: {processed_dir}")
    print()

    all_valid = True
    frames = {}

    for table_name in TABLE_FILES:
        print(f"Validating: {table_name}")
        print("-" * 40)

        result = check_table(processed_dir, table_name)
        schema = result["schema"]

        if schema is not None:
            print(f"  Rows: {schema['total_rows']:,}  Columns: {schema['total_columns']}")
            if schema["is_valid"]:
                print("  ✓ Schema valid")
            else:
                print(f"  ✗ Missing required: {schema['missing_required']}")
                all_valid = False
            if schema["missing_optional"]:
                print(f"  ⚠ Missing optional: {schema['missing_optional']}")

        for err in result["errors"]:
            print(f"  ✗ {err}")
            all_valid = False

        if result["df"] is not None:
            print("  ✓ Column types valid")
            frames[table_name] = result["df"]

        print()

    if len(frames) == len(TABLE_FILES):
        print("Cross-table references")
        print("-" * 40)
        issues = find_reference_issues(frames["employees"], frames["projects"], frames["commitments"])
        for err in issues["errors"]:
            print(f"  ✗ {err}")
            all_valid = False
        for warning in issues["warnings"]:
            print(f"  ⚠ {warning} (dropped on load)")
        if not issues["errors"] and not issues["warnings"]:
            print("  ✓ All references resolve")
        print()

    print("=" * 60)
    if all_valid:
        print("✓ All validations passed")
        sys.exit(0)
    else:
        print("✗ Validation failed - see errors above")
        sys.exit(1)


if __name__ == "__main__":
    main()
