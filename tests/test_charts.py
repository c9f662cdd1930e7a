import math

from lambdic.comparison import merge_for_overlay, normalize
from lambdic.pipeline import ComparisonResult
from lambdic.render import asset_figure, comparison_figure

from .helpers import make_series


def _with_forecast():
    return make_series(
        "gold",
        [("2024-01-01", 1.0), ("2024-02-01", 1.1), ("2024-03-01", 1.2, 1.0, 1.4), ("2024-04-01", 1.3, 1.0, 1.6)],
        name="Gold",
    )


def test_asset_figure_splits_history_and_forecast_band():
    fig = asset_figure(_with_forecast(), selected_date="2024-02-01")

    names = [t.name for t in fig.data]
    assert names == ["Historical", None, "Forecast range", "Median forecast"]
    assert list(fig.data[0].x) == ["2024-01-01", "2024-02-01"]
    assert list(fig.data[2].y) == [1.4, 1.6]
    assert "Gold Priced in BTC" in fig.layout.title.text


def test_asset_figure_without_forecast_has_single_line():
    fig = asset_figure(make_series("oil", [("2024-01-01", 1.0)]))

    assert len(fig.data) == 1


def _result():
    normalized = (
        normalize(make_series("a", [("2020-01-01", 0.0), ("2020-02-01", 1.0)], name="A")),
        normalize(make_series("b", [("2020-01-01", 2.0), ("2020-03-01", 3.0)], name="B")),
    )
    return ComparisonResult(series=normalized, overlay=merge_for_overlay(normalized))


def test_overlay_figure_draws_non_finite_values_as_gaps():
    fig = comparison_figure(_result(), view_mode="overlay")

    assert [t.name for t in fig.data] == ["A", "B"]
    assert all(v is None for v in fig.data[0].y)
    assert fig.data[1].y[0] == 1.0
    assert math.isclose(fig.data[1].y[2], 1.5)


def test_separate_figure_has_one_trace_per_asset():
    fig = comparison_figure(_result(), view_mode="separate", selected_date="2020-02-01")

    assert len(fig.data) == 2
    assert fig.layout.title.text == "Asset Comparison - Separate View"


def test_overlay_figure_leaves_missing_dates_unconnected():
    fig = comparison_figure(_result(), view_mode="overlay")

    assert all(not t.connectgaps for t in fig.data)
    assert fig.data[1].y[1] is None
