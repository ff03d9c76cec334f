"""
Tests for the planning statistics: wages, involvement and budgets.
"""
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from planning.data.model import Employee, Project
from planning.data.registry import RegistryBuilder
from planning.metrics.budget import wage_at_most

# Monday 1 January 2024 to Friday 12 January 2024: 10 working days
TEN_DAYS = (date(2024, 1, 1), date(2024, 1, 12))
# Monday 15 January 2024 to Friday 19 January 2024: 5 working days
FIVE_DAYS = (date(2024, 1, 15), date(2024, 1, 19))


def make_scenario(ann_hours: int = 4, bo_hours: int = 6) -> RegistryBuilder:
    """Ann (wage 20) and Bo (wage 30) on P1 (10 working days), managed by Ann."""
    ann = Employee(1, "Ann", 20)
    bo = Employee(2, "Bo", 30)
    return (
        RegistryBuilder("scenario", 2024)
        .add_employee(ann)
        .add_employee(bo)
        .add_project(Project("P1", "Pilot", *TEN_DAYS), ann)
        .add_commitment("P1", 1, ann_hours)
        .add_commitment("P1", 2, bo_hours)
    )


class TestScenario:
    """The reference scenario with Ann and Bo."""

    def test_average_hourly_wage(self):
        assert make_scenario().build().average_hourly_wage() == 25.0

    def test_total_manpower_budget(self):
        """10*4*20 + 10*6*30 = 800 + 1800."""
        assert make_scenario().build().total_manpower_budget() == 2600

    def test_longest_project(self):
        assert make_scenario().build().longest_project().code == "P1"

    def test_no_full_time_employees(self):
        assert make_scenario().build().full_time_employees() == set()

    def test_full_time_after_eight_hour_commitment(self):
        """Ann committing 8h on a second project makes her full-time."""
        builder = make_scenario()
        registry = builder.build()
        ann = registry.get_employee(1)
        builder.add_project(Project("P2", "Second", *FIVE_DAYS), ann).add_commitment("P2", 1, 8)

        result = registry.full_time_employees()
        assert result == {ann}
        assert next(iter(result)) is ann
        assert next(iter(result)).name == "Ann"


class TestAverageHourlyWage:
    """Tests for the wage average."""

    def test_empty_registry_returns_sentinel(self):
        assert RegistryBuilder().build().average_hourly_wage() == 0.0

    def test_non_integer_mean(self):
        registry = (
            RegistryBuilder()
            .add_employee(Employee(1, "Ann", 20))
            .add_employee(Employee(2, "Bo", 25))
            .build()
        )
        assert registry.average_hourly_wage() == pytest.approx(22.5)

    def test_includes_employees_without_commitments(self):
        registry = make_scenario().add_employee(Employee(3, "Cy", 40)).build()
        assert registry.average_hourly_wage() == pytest.approx(30.0)


class TestLongestProject:
    """Tests for the longest project and its tie-break."""

    def test_empty_registry(self):
        assert RegistryBuilder().build().longest_project() is None

    def test_picks_maximum(self):
        ann = Employee(1, "Ann", 20)
        registry = (
            RegistryBuilder()
            .add_project(Project("A", "Short", *FIVE_DAYS), ann)
            .add_project(Project("B", "Long", *TEN_DAYS), ann)
            .build()
        )
        assert registry.longest_project().code == "B"

    def test_tie_goes_to_smallest_code(self):
        """Equal working days: the lexicographically smaller code wins, whatever the insertion order."""
        ann = Employee(1, "Ann", 20)
        registry = (
            RegistryBuilder()
            .add_project(Project("P2", "Second", *TEN_DAYS), ann)
            .add_project(Project("P10", "Tenth", date(2024, 2, 5), date(2024, 2, 16)), ann)
            .add_project(Project("P1", "First", date(2024, 3, 4), date(2024, 3, 15)), ann)
            .build()
        )
        assert registry.longest_project().code == "P1"


class TestMostInvolvedEmployees:
    """Tests for the broadest project assignment."""

    def test_empty_registry(self):
        registry = RegistryBuilder().build()
        assert registry.most_involved_employees() == set()
        assert registry.max_project_involvement() == 0

    def test_returns_all_ties(self):
        ann = Employee(1, "Ann", 20)
        bo = Employee(2, "Bo", 30)
        cy = Employee(3, "Cy", 40)
        registry = (
            RegistryBuilder()
            .add_employee(ann)
            .add_employee(bo)
            .add_employee(cy)
            .add_project(Project("P1", "One", *TEN_DAYS), ann)
            .add_project(Project("P2", "Two", *FIVE_DAYS), ann)
            .add_commitment("P1", 1, 2)
            .add_commitment("P2", 1, 2)
            .add_commitment("P1", 2, 2)
            .add_commitment("P2", 2, 2)
            .add_commitment("P1", 3, 2)
            .build()
        )
        assert registry.most_involved_employees() == {ann, bo}
        assert registry.max_project_involvement() == 2

    def test_counts_distinct_projects(self):
        """Repeated commitments on one project count once."""
        ann = Employee(1, "Ann", 20)
        bo = Employee(2, "Bo", 30)
        registry = (
            RegistryBuilder()
            .add_employee(ann)
            .add_employee(bo)
            .add_project(Project("P1", "One", *TEN_DAYS), ann)
            .add_project(Project("P2", "Two", *FIVE_DAYS), ann)
            .add_commitment("P1", 1, 2)
            .add_commitment("P1", 1, 2)
            .add_commitment("P1", 1, 2)
            .add_commitment("P1", 2, 2)
            .add_commitment("P2", 2, 2)
            .build()
        )
        assert registry.most_involved_employees() == {bo}

    def test_managed_projects_do_not_count(self):
        ann = Employee(1, "Ann", 20)
        bo = Employee(2, "Bo", 30)
        registry = (
            RegistryBuilder()
            .add_employee(bo)
            .add_project(Project("P1", "One", *TEN_DAYS), ann)
            .add_project(Project("P2", "Two", *FIVE_DAYS), ann)
            .add_commitment("P1", 2, 2)
            .build()
        )
        assert registry.most_involved_employees() == {bo}
        assert registry.max_project_involvement() == 1


class TestTotalManpowerBudget:
    """Tests for the total budget."""

    def test_empty_registry(self):
        assert RegistryBuilder().build().total_manpower_budget() == 0

    def test_doubling_hours_doubles_budget(self):
        single = make_scenario(4, 6).build().total_manpower_budget()
        doubled = make_scenario(8, 12).build().total_manpower_budget()
        assert doubled == 2 * single

    def test_repeated_commitments_double_budget(self):
        builder = make_scenario()
        builder.add_commitment("P1", 1, 4).add_commitment("P1", 2, 6)
        assert builder.build().total_manpower_budget() == 5200

    def test_sums_across_projects(self):
        builder = make_scenario()
        ann = builder.build().get_employee(1)
        builder.add_project(Project("P2", "Second", *FIVE_DAYS), ann).add_commitment("P2", 2, 2)
        # 2600 + 5 * 2 * 30
        assert builder.build().total_manpower_budget() == 2900

    def test_returns_int(self):
        assert isinstance(make_scenario().build().total_manpower_budget(), int)


class TestManagedBudget:
    """Tests for managed budgets and the overview."""

    def _registry(self):
        builder = make_scenario()
        bo = builder.build().get_employee(2)
        cy = Employee(3, "Cy", 22)
        return (
            builder
            .add_employee(cy)
            .add_project(Project("P2", "Second", *FIVE_DAYS), bo)
            .add_commitment("P2", 1, 2)
            .build()
        )

    def test_managed_budget(self):
        registry = self._registry()
        assert registry.managed_budget(registry.get_employee(1)) == 2600
        # 5 * 2 * 20
        assert registry.managed_budget(registry.get_employee(2)) == 200
        assert registry.managed_budget(registry.get_employee(3)) == 0

    def test_overview_excludes_failing_predicate(self):
        """Only junior employees appear; non-managers are included with 0."""
        registry = self._registry()
        overview = registry.managed_budget_overview(wage_at_most(26))
        assert overview == {registry.get_employee(1): 2600, registry.get_employee(3): 0}
        assert registry.get_employee(2) not in overview

    def test_overview_ordered_by_number(self):
        registry = self._registry()
        overview = registry.managed_budget_overview(lambda e: True)
        assert [e.number for e in overview] == [1, 2, 3]

    def test_overview_empty_registry(self):
        assert RegistryBuilder().build().managed_budget_overview(lambda e: True) == {}

    def test_default_junior_threshold(self):
        predicate = wage_at_most()
        assert predicate(Employee(1, "Ann", 26))
        assert not predicate(Employee(2, "Bo", 27))


class TestFullTimeEmployees:
    """Tests for full-time detection."""

    def test_only_committing_employee_returned(self):
        """Colleagues on the same project below the threshold are not included."""
        registry = make_scenario(ann_hours=8, bo_hours=6).build()
        assert registry.full_time_employees() == {registry.get_employee(1)}

    def test_accumulated_hours_count(self):
        builder = make_scenario(ann_hours=4)
        builder.add_commitment("P1", 1, 4)
        registry = builder.build()
        assert registry.full_time_employees() == {registry.get_employee(1)}

    def test_custom_threshold(self):
        registry = make_scenario().build()
        assert registry.full_time_employees(threshold=6) == {registry.get_employee(2)}

    def test_empty_registry(self):
        assert RegistryBuilder().build().full_time_employees() == set()
