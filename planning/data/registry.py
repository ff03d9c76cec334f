"""
The project planning registry (PPS) and the builder that assembles it.

The builder is the only way facts enter a registry: loaders and tests call
add_employee / add_project / add_commitment in any order such that references
resolve, then build(). Queries are read-only and delegate to the metrics pack.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Set

from planning.config import config
from planning.data.model import Employee, Project
from planning.logging_config import get_logger
from planning.metrics import budget, monthly_spend, projects as project_metrics, wages

logger = get_logger("data.registry")


class Registry:
    """Employees and projects of one planning year, plus the statistics over them."""

    def __init__(self, name: str = "none", planning_year: Optional[int] = None):
        self.name = name
        self.planning_year = planning_year if planning_year is not None else config.planning_year
        self._employees: Dict[int, Employee] = {}
        self._projects: Dict[str, Project] = {}

    def __str__(self):
        return f"PPS_e{len(self._employees)}_p{len(self._projects)}"

    __repr__ = __str__

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def employees(self) -> List[Employee]:
        """All employees, ordered by number."""
        return [self._employees[n] for n in sorted(self._employees)]

    @property
    def projects(self) -> List[Project]:
        """All projects, ordered by code."""
        return [self._projects[c] for c in sorted(self._projects)]

    def get_employee(self, number: int) -> Optional[Employee]:
        return self._employees.get(number)

    def get_project(self, code: str) -> Optional[Project]:
        return self._projects.get(code)

    def managed_projects(self, employee: Employee) -> List[Project]:
        """Registered projects managed by the employee, ordered by code."""
        return [
            self._projects[code]
            for code in sorted(employee.managed_project_codes)
            if code in self._projects
        ]

    # -------------------------------------------------------------------------
    # Registration (used by RegistryBuilder)
    # -------------------------------------------------------------------------

    def add_or_get_employee(self, employee: Employee) -> Employee:
        """Register the employee unless its number is known; return the kept instance."""
        existing = self._employees.get(employee.number)
        if existing is not None:
            if existing is not employee:
                logger.debug("employee_already_registered", extra={"employee_number": employee.number})
            return existing
        self._employees[employee.number] = employee
        return employee

    def add_or_get_project(self, project: Project) -> Project:
        """Register the project unless its code is known; return the kept instance."""
        existing = self._projects.get(project.code)
        if existing is not None:
            if existing is not project:
                logger.debug("project_already_registered", extra={"project_code": project.code})
            return existing
        self._projects[project.code] = project
        return project

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def average_hourly_wage(self) -> float:
        return wages.average_hourly_wage(self)

    def longest_project(self) -> Optional[Project]:
        return project_metrics.longest_project(self)

    def most_involved_employees(self) -> Set[Employee]:
        return project_metrics.most_involved_employees(self)

    def max_project_involvement(self) -> int:
        return project_metrics.max_project_involvement(self)

    def total_manpower_budget(self) -> int:
        return budget.total_manpower_budget(self)

    def managed_budget(self, employee: Employee) -> int:
        return budget.managed_budget(self, employee)

    def managed_budget_overview(self, predicate: Callable[[Employee], bool]) -> Dict[Employee, int]:
        return budget.managed_budget_overview(self, predicate)

    def cumulative_monthly_spends(self) -> Dict[int, int]:
        return monthly_spend.cumulative_monthly_spends(self)

    def full_time_employees(self, threshold: Optional[int] = None) -> Set[Employee]:
        return wages.full_time_employees(self, threshold)


class RegistryBuilder:
    """
    Compose a registry from discrete facts using method chaining.

    Example:
        registry = (
            RegistryBuilder()
            .add_employee(ann)
            .add_project(p1, ann)
            .add_commitment("P1", ann.number, 4)
            .build()
        )
    """

    def __init__(self, name: str = "none", planning_year: Optional[int] = None):
        self._registry = Registry(name, planning_year)

    def add_employee(self, employee: Employee) -> "RegistryBuilder":
        """Add an employee; a number that is already registered keeps the first instance."""
        self._registry.add_or_get_employee(employee)
        return self

    def add_project(self, project: Project, manager: Employee) -> "RegistryBuilder":
        """
        Add a project and register the manager as its manager.

        The manager is registered as an employee if needed. When the project code
        is already known, the existing project and its manager are left as they are.
        """
        kept_manager = self._registry.add_or_get_employee(manager)
        is_new = self._registry.get_project(project.code) is None
        self._registry.add_or_get_project(project)
        if is_new:
            kept_manager.managed_project_codes.add(project.code)
        return self

    def add_commitment(self, project_code: str, employee_number: int, hours_per_day: int) -> "RegistryBuilder":
        """
        Add hours/day for an employee on a project, on top of any earlier commitment.

        Unknown project codes or employee numbers are dropped without error.
        """
        project = self._registry.get_project(project_code)
        employee = self._registry.get_employee(employee_number)
        if project is None or employee is None:
            logger.debug("commitment_dropped", extra={
                "project_code": project_code,
                "employee_number": employee_number,
                "hours_per_day": hours_per_day,
                "project_known": project is not None,
                "employee_known": employee is not None,
            })
            return self

        project.add_commitment(employee, hours_per_day)
        return self

    def build(self) -> Registry:
        """Return the registry being built (always the same instance)."""
        return self._registry
