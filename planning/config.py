"""
Application configuration management.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field


def _default_data_dir() -> Path:
    env_dir = os.getenv("DATA_DIR")
    if env_dir:
        return Path(env_dir)
    return Path("./data")


@dataclass
class AppConfig:
    """Application configuration with environment overrides."""

    # Paths
    data_dir: Path = field(default_factory=_default_data_dir)

    # Environment
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))

    # Cache settings
    cache_ttl_seconds: int = field(default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "3600")))

    # Planning defaults
    planning_year: int = field(default_factory=lambda: int(os.getenv("PLANNING_YEAR", "2000")))
    junior_wage_threshold: int = field(default_factory=lambda: int(os.getenv("JUNIOR_WAGE_THRESHOLD", "26")))
    full_time_hours_per_day: int = field(default_factory=lambda: int(os.getenv("FULL_TIME_HOURS_PER_DAY", "8")))

    @property
    def processed_dir(self) -> Path:
        return self.data_dir / "processed"


# Global config instance
config = AppConfig()


# Sentinel returned when an average is taken over no employees
EMPTY_AVERAGE = 0.0

# Table file names (extension resolved at load time: parquet, then csv)
TABLE_FILES = {
    "employees": "employees",
    "projects": "projects",
    "commitments": "commitments",
}

# Required columns (hard fail if missing)
REQUIRED_COLUMNS = {
    "employees": [
        "number",
        "name",
        "hourly_wage",
    ],
    "projects": [
        "code",
        "name",
        "start_date",
        "end_date",
        "manager_number",
    ],
    "commitments": [
        "project_code",
        "employee_number",
        "hours_per_day",
    ],
}

# Optional columns (soft warn if missing)
OPTIONAL_COLUMNS = {
    "projects": [
        "planning_year",
    ],
}
