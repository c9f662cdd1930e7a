import math

from lambdic.insights import summarize

from .helpers import make_series


def _series():
    return make_series("gold", [("2021-01-01", 2.0), ("2021-02-01", 3.0), ("2021-03-01", 1.0)])


def test_summary_runs_from_first_to_last_point():
    insights = summarize(_series())

    assert (insights.start_date, insights.end_date, insights.current_date) == (
        "2021-01-01",
        "2021-03-01",
        "2021-03-01",
    )
    assert math.isclose(insights.percent_change, -50.0)
    assert not insights.is_positive


def test_summary_at_selected_date():
    insights = summarize(_series(), selected_date="2021-02-01")

    assert insights.current_value == 3.0
    assert math.isclose(insights.percent_change, 50.0)
    assert insights.is_positive
    assert "50.00%" in insights.describe("Gold", selected=True)


def test_unknown_selected_date_falls_back_to_last_point():
    insights = summarize(_series(), selected_date="2030-01-01")

    assert insights.current_date == "2021-03-01"


def test_empty_series_has_no_summary():
    assert summarize(make_series("gold", [])) is None


def test_zero_start_value_gives_non_finite_change():
    insights = summarize(make_series("cpi", [("2021-01-01", 0.0), ("2021-02-01", 1.0)]))

    assert not math.isfinite(insights.percent_change)
