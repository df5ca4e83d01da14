import datetime as dt
from collections.abc import Callable

from agenda.domain.models import Appointment
from agenda.schedule.sorting import sort_appointments

# Fixtures (appointment_factory) provided by tests/conftest.py

Factory = Callable[..., Appointment]


def _ids(appointments: list[Appointment]) -> list[str]:
    return [a.appointment_id for a in appointments]


class TestSortAppointments:
    def test_earlier_time_first_on_same_date(self, appointment_factory: Factory) -> None:
        afternoon = appointment_factory("a", date=dt.date(2024, 2, 21), time=dt.time(14, 30))
        morning = appointment_factory("b", date=dt.date(2024, 2, 21), time=dt.time(9, 0))

        assert _ids(sort_appointments([afternoon, morning])) == ["b", "a"]

    def test_date_dominates_time(self, appointment_factory: Factory) -> None:
        late_first_day = appointment_factory("a", date=dt.date(2024, 2, 20), time=dt.time(23, 0))
        early_next_day = appointment_factory("b", date=dt.date(2024, 2, 21), time=dt.time(6, 0))

        assert _ids(sort_appointments([early_next_day, late_first_day])) == ["a", "b"]

    def test_equal_instants_break_ties_by_id(self, appointment_factory: Factory) -> None:
        appointments = [
            appointment_factory(i, date=dt.date(2024, 2, 21), time=dt.time(10, 0))
            for i in ("c", "a", "b")
        ]

        assert _ids(sort_appointments(appointments)) == ["a", "b", "c"]

    def test_output_is_non_decreasing_and_idempotent(self, appointment_factory: Factory) -> None:
        appointments = [
            appointment_factory("1", date=dt.date(2024, 3, 1), time=dt.time(8, 0)),
            appointment_factory("2", date=dt.date(2024, 1, 5), time=dt.time(16, 45)),
            appointment_factory("3", date=dt.date(2024, 1, 5), time=dt.time(9, 15)),
            appointment_factory("4", date=dt.date(2024, 2, 29), time=dt.time(12, 0)),
        ]

        once = sort_appointments(appointments)

        starts = [a.starts_at for a in once]
        assert starts == sorted(starts)
        assert sort_appointments(once) == once

    def test_does_not_mutate_input(self, appointment_factory: Factory) -> None:
        appointments = [
            appointment_factory("2", time=dt.time(11, 0)),
            appointment_factory("1", time=dt.time(9, 0)),
        ]

        result = sort_appointments(appointments)

        assert _ids(appointments) == ["2", "1"]
        assert _ids(result) == ["1", "2"]

    def test_empty(self) -> None:
        assert sort_appointments([]) == []
