from lambdic.series import Bounds, Series, SeriesPoint


def make_series(asset_id, rows, name=None):
    """rows: (date, value) or (date, value, low, high) tuples."""
    points = []
    for row in rows:
        if len(row) == 4:
            date, value, low, high = row
            points.append(SeriesPoint(date=date, value=value, bounds=Bounds(low=low, high=high)))
        else:
            date, value = row
            points.append(SeriesPoint(date=date, value=value))
    return Series(asset_id=asset_id, name=name or asset_id, points=tuple(points))


class FakeRegistry:
    def __init__(self, series_by_id):
        self.series_by_id = series_by_id
        self.calls = []

    def load(self, asset_id):
        self.calls.append(asset_id)
        return self.series_by_id.get(asset_id, Series.empty(asset_id))
