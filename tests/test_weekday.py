from datetime import datetime, timedelta, timezone

from engine.patterns.weekday import day_of_week_averages, next_peak_day, peak_weekday

SUNDAY = datetime(2024, 3, 10, tzinfo=timezone.utc)


def test_averages_per_bucket():
    timestamps = [SUNDAY, SUNDAY + timedelta(days=7), SUNDAY + timedelta(days=2)]
    averages = day_of_week_averages([10.0, 20.0, 6.0], timestamps)
    assert set(averages) == set(range(7))
    assert averages[0] == 15.0
    assert averages[2] == 6.0
    assert averages[1] == 0.0


def test_peak_prefers_first_on_ties():
    assert peak_weekday({0: 5.0, 1: 9.0, 2: 9.0}, default=4) == 1
    assert peak_weekday({d: 0.0 for d in range(7)}, default=4) == 4


def test_next_peak_day_is_strictly_in_the_future(now):
    # now is a Wednesday
    friday_heavy = {d: (20.0 if d == 5 else 10.0) for d in range(7)}
    assert next_peak_day(friday_heavy, now).date().isoformat() == "2024-03-15"

    monday_heavy = {d: (20.0 if d == 1 else 10.0) for d in range(7)}
    assert next_peak_day(monday_heavy, now).date().isoformat() == "2024-03-18"

    wednesday_heavy = {d: (20.0 if d == 3 else 10.0) for d in range(7)}
    assert next_peak_day(wednesday_heavy, now).date().isoformat() == "2024-03-20"


def test_next_peak_day_without_history(now):
    assert next_peak_day({d: 0.0 for d in range(7)}, now) == now + timedelta(days=7)
