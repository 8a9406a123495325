"""Tests for the runner executor."""

from datetime import date

import pytest

from birthday_greeter.clock import FixedClock
from birthday_greeter.greeter import LeapDayRule
from birthday_greeter.runner.executor import Executor
from birthday_greeter.runner.schema import RunnerInput


def _input(**overrides):
    data = {
        "clock": {
            "type": "fixed",
            "instant": "2025-01-09T09:00:00Z",
            "zone": "Pacific/Honolulu",
        },
        "customers": [
            {"name": "Elvis", "birthday": "1935-01-08"},
            {"name": "Mark Foster", "birthday": "1984-02-29"},
        ],
    }
    data.update(overrides)
    return RunnerInput.model_validate(data)


class TestExecute:
    """Tests for Executor.execute()."""

    @pytest.fixture
    def executor(self):
        return Executor()

    def test_greets_against_projected_date(self, executor):
        output = executor.execute(_input())

        assert output.success is True
        assert output.today == date(2025, 1, 8)
        assert output.zone == "Pacific/Honolulu"
        assert [g.greeting for g in output.greetings] == [
            "Happy Birthday, Elvis!",
            "Hello, Mark Foster!",
        ]
        assert [g.is_birthday for g in output.greetings] == [True, False]

    def test_leap_day_rule_from_input(self, executor):
        output = executor.execute(
            _input(
                clock={"type": "fixed", "instant": "2025-02-28T12:00:00Z"},
                leap_day="feb28",
            )
        )

        assert output.success is True
        assert output.greetings[1].greeting == "Happy Birthday, Mark Foster!"

    def test_offset_clock_with_iso_duration(self, executor):
        # 23:58 in Berlin on the 7th, shifted three minutes into the 8th
        output = executor.execute(
            _input(
                clock={
                    "type": "offset",
                    "offset": "PT3M",
                    "base": {
                        "type": "fixed",
                        "instant": "2025-01-07T22:58:00Z",
                        "zone": "Europe/Berlin",
                    },
                }
            )
        )

        assert output.success is True
        assert output.today == date(2025, 1, 8)
        assert output.zone == "Europe/Berlin"
        assert output.greetings[0].is_birthday is True

    def test_negative_offset_in_seconds(self, executor):
        output = executor.execute(
            _input(
                clock={
                    "type": "offset",
                    "offset": -600,
                    "base": {"type": "fixed", "instant": "2025-01-09T00:05:00Z"},
                }
            )
        )

        assert output.success is True
        assert output.today == date(2025, 1, 8)
        assert output.zone == "UTC"

    def test_no_customers(self, executor):
        output = executor.execute(_input(customers=[]))

        assert output.success is True
        assert output.greetings == []

    def test_invalid_zone_reported(self, executor):
        output = executor.execute(
            _input(clock={"type": "fixed", "instant": "2025-01-08T09:00:00Z", "zone": "Moon/Base"})
        )

        assert output.success is False
        assert output.error_type == "ClockFactoryError"
        assert "Moon/Base" in output.error
        assert output.greetings == []

    def test_region_directory_zone_reported(self, executor):
        output = executor.execute(
            _input(clock={"type": "fixed", "instant": "2025-01-08T09:00:00Z", "zone": "America"})
        )

        assert output.success is False
        assert output.error_type == "ClockFactoryError"
        assert "'America'" in output.error
        assert "site-packages" not in output.error

    def test_unknown_clock_type_reported(self, executor):
        output = executor.execute(_input(clock={"type": "hourglass"}))

        assert output.success is False
        assert output.error_type == "ClockFactoryError"


class TestInjectedClock:
    """Tests for clock injection."""

    def test_injected_clock_overrides_config(self):
        clock = FixedClock.parse("2025-01-08T09:00:00Z", "Europe/Berlin")
        executor = Executor(clock=clock)

        output = executor.execute(_input(clock={"type": "hourglass"}))

        assert output.success is True
        assert output.today == date(2025, 1, 8)
        assert output.zone == "Europe/Berlin"

    def test_leap_rule_parsed_to_enum(self):
        data = _input(leap_day="feb28")
        assert data.leap_day is LeapDayRule.FEBRUARY_28
