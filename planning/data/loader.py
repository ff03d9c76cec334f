"""
Data loading: read the planning tables and replay them through the builder.
"""
import pandas as pd
from pathlib import Path
from typing import Optional, Dict, Any, List

from planning.config import config, TABLE_FILES
from planning.data.model import Employee, Project
from planning.data.registry import Registry, RegistryBuilder
from planning.data.schema import validate_schema, ensure_column_types
from planning.logging_config import get_logger

logger = get_logger("data.loader")


class RegistryLoadError(Exception):
    """Raised when the planning tables do not describe a consistent registry."""
    pass


def _load_file(filepath: Path) -> Optional[pd.DataFrame]:
    """Load a single table file, preferring parquet over csv."""
    parquet_path = filepath.with_suffix(".parquet")
    csv_path = filepath.with_suffix(".csv")

    if parquet_path.exists():
        return pd.read_parquet(parquet_path)
    if csv_path.exists():
        return pd.read_csv(csv_path)
    return None


def find_reference_issues(employees: pd.DataFrame,
                          projects: pd.DataFrame,
                          commitments: pd.DataFrame) -> Dict[str, List[str]]:
    """
    Cross-check typed planning tables against each other.

    Returns a dict with:
    - errors: rows that make build_registry fail (unknown managers, negative wages)
    - warnings: commitments the builder will drop (unknown project or employee)
    """
    errors = []
    warnings = []

    numbers = set(employees["number"])
    codes = set(projects["code"])

    for row in employees[employees["hourly_wage"] < 0].itertuples(index=False):
        errors.append(f"Employee {row.number} has a negative hourly wage: {row.hourly_wage}")

    for row in projects[~projects["manager_number"].isin(numbers)].itertuples(index=False):
        errors.append(f"Project {row.code} refers to unknown manager {row.manager_number}")

    for row in commitments[~commitments["project_code"].isin(codes)].itertuples(index=False):
        warnings.append(f"Commitment of employee {row.employee_number} refers to unknown project {row.project_code}")

    for row in commitments[~commitments["employee_number"].isin(numbers)].itertuples(index=False):
        warnings.append(f"Commitment on project {row.project_code} refers to unknown employee {row.employee_number}")

    return {"errors": errors, "warnings": warnings}


def load_table(table_name: str, data_dir: Optional[Path] = None) -> pd.DataFrame:
    """Load and validate one planning table from the processed directory."""
    processed_dir = Path(data_dir) / "processed" if data_dir is not None else config.processed_dir
    filepath = processed_dir / TABLE_FILES[table_name]
    df = _load_file(filepath)
    if df is None:
        raise FileNotFoundError(f"Could not find {TABLE_FILES[table_name]}.(parquet|csv) in {processed_dir}")

    result = validate_schema(df, table_name, strict=True)
    if result["missing_optional"]:
        logger.info("optional_columns_missing", extra={
            "table": table_name,
            "columns": result["missing_optional"],
        })
    return ensure_column_types(df)


def build_registry(employees: pd.DataFrame,
                   projects: pd.DataFrame,
                   commitments: pd.DataFrame,
                   name: str = "none",
                   planning_year: Optional[int] = None) -> Registry:
    """
    Replay planning tables through the builder.

    Employees are added first, then projects with their managers, then
    commitments. Commitments referring to unknown projects or employees are
    dropped by the builder.
    """
    for table_name, df in (("employees", employees), ("projects", projects), ("commitments", commitments)):
        validate_schema(df, table_name, strict=True)
    employees = ensure_column_types(employees)
    projects = ensure_column_types(projects)
    commitments = ensure_column_types(commitments)

    if planning_year is None and "planning_year" in projects.columns and len(projects) > 0:
        planning_year = int(projects["planning_year"].iloc[0])

    builder = RegistryBuilder(name, planning_year)
    staff: Dict[int, Employee] = {}

    for row in employees.itertuples(index=False):
        try:
            employee = Employee(number=int(row.number), name=row.name, hourly_wage=int(row.hourly_wage))
        except ValueError as e:
            raise RegistryLoadError(str(e)) from e
        builder.add_employee(employee)
        staff.setdefault(employee.number, employee)

    for row in projects.itertuples(index=False):
        manager = staff.get(int(row.manager_number))
        if manager is None:
            raise RegistryLoadError(
                f"Project {row.code} refers to unknown manager {row.manager_number}"
            )
        project = Project(code=row.code, name=row.name, start_date=row.start_date, end_date=row.end_date)
        builder.add_project(project, manager)

    for row in commitments.itertuples(index=False):
        builder.add_commitment(row.project_code, int(row.employee_number), int(row.hours_per_day))

    registry = builder.build()
    logger.info("registry_loaded", extra={
        "source": name,
        "planning_year": registry.planning_year,
        "employees": len(registry.employees),
        "projects": len(registry.projects),
    })
    return registry


def load_registry(data_dir: Optional[Path] = None, name: Optional[str] = None) -> Registry:
    """Load the employees, projects and commitments tables into a registry."""
    data_dir = Path(data_dir) if data_dir is not None else config.data_dir
    return build_registry(
        load_table("employees", data_dir),
        load_table("projects", data_dir),
        load_table("commitments", data_dir),
        name=name or str(data_dir),
    )


def get_data_status(data_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Get status of all planning table files."""
    processed_dir = Path(data_dir) / "processed" if data_dir is not None else config.processed_dir
    status = {}
    for key, filename in TABLE_FILES.items():
        status[key] = {
            "parquet_exists": (processed_dir / f"{filename}.parquet").exists(),
            "csv_exists": (processed_dir / f"{filename}.csv").exists(),
        }
    return status
