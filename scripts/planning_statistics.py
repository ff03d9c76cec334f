#!/usr/bin/env python
"""
Print the planning statistics of a set of planning tables.

Usage:
    python scripts/planning_statistics.py
    python scripts/planning_statistics.py --data-dir /path/to/data --junior-wage 30
"""
import argparse
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from planning.config import config
from planning.data.loader import load_registry, RegistryLoadError
from planning.data.schema import SchemaValidationError
from planning.logging_config import configure_logging
from planning.report import planning_statistics_report


def main():
    parser = argparse.ArgumentParser(description="Print planning statistics")
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Override data directory"
    )
    parser.add_argument(
        "--junior-wage",
        type=int,
        default=None,
        help="Highest hourly wage counted as junior for the managed budget overview"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args()

    configure_logging("DEBUG" if args.verbose else None, stream=sys.stderr)

    data_dir = Path(args.data_dir) if args.data_dir else config.data_dir

    try:
        registry = load_registry(data_dir)
    except (FileNotFoundError, SchemaValidationError, RegistryLoadError, ValueError) as e:
        print(f"ERROR: Could not load planning tables from {data_dir / 'processed'}: {e}")
        sys.exit(1)

    print(planning_statistics_report(registry, junior_wage=args.junior_wage))


if __name__ == "__main__":
    main()
