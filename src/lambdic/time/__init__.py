from .alignment import AlignMode, align, date_span, intersect_dates, union_dates

__all__ = ["AlignMode", "align", "date_span", "intersect_dates", "union_dates"]
