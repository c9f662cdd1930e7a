from __future__ import annotations

import argparse
import logging
from pathlib import Path

from lambdic import load_config
from lambdic.basket import check_basket
from lambdic.comparison import ComparisonSelection, SelectionLimitError
from lambdic.insights import summarize
from lambdic.pipeline import SimulatorEngine
from lambdic.render import asset_figure, comparison_figure
from lambdic.utils import parse_date

logger = logging.getLogger(__name__)


def _parse_weight(item: str) -> tuple[str, float]:
    asset_id, sep, value = item.partition("=")
    if not sep or not asset_id.strip():
        raise argparse.ArgumentTypeError(f"Expected ASSET=WEIGHT, got {item!r}")
    try:
        return asset_id.strip(), float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid weight in {item!r}") from exc


def _check_weights(cfg, weights: dict[str, float]) -> bool:
    result = check_basket(weights, cfg)
    for w in result.warnings:
        logger.warning(w)
    for e in result.errors:
        logger.error(e)
    return result.is_valid


def _cmd_single(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    series = SimulatorEngine(cfg).single(args.asset_id)
    print(series.to_frame().to_string(index=False))
    return 0


def _cmd_basket(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    weights = dict(args.weight)
    if not _check_weights(cfg, weights):
        return 2

    composite = SimulatorEngine(cfg).basket(weights)
    print(composite.to_frame().to_string(index=False))
    return 0


def _select_compared(cfg, asset_ids: list[str]) -> tuple[str, ...] | None:
    """Distinct ids in order, or None when the comparison cap is exceeded."""
    selection = ComparisonSelection(max_assets=cfg.limits.max_compared_assets)
    try:
        for asset_id in dict.fromkeys(asset_ids):
            selection = selection.toggle(asset_id)
    except SelectionLimitError as e:
        logger.error(str(e))
        return None
    return selection.asset_ids


def _cmd_compare(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    asset_ids = _select_compared(cfg, args.asset_id)
    if asset_ids is None:
        return 2

    result = SimulatorEngine(cfg).compare(asset_ids, start=args.start, end=args.end)
    print(result.overlay.to_string(index=False))
    return 0


def _cmd_insights(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    series = SimulatorEngine(cfg).single(args.asset_id)
    insights = summarize(series, selected_date=args.date)
    if insights is None:
        print("No data available")
        return 0

    unit = cfg.project.reference_unit
    print(f"Current value: {insights.current_value:.6f} {unit} ({insights.current_date})")
    print(f"Start ({insights.start_date}): {insights.start_value:.6f} {unit}")
    print(f"Latest ({insights.end_date}): {insights.end_value:.6f} {unit}")
    print(insights.describe(cfg.display_name(args.asset_id), unit, selected=args.date is not None))
    return 0


def _cmd_chart(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    engine = SimulatorEngine(cfg)
    unit = cfg.project.reference_unit

    if args.weight:
        weights = dict(args.weight)
        if not _check_weights(cfg, weights):
            return 2
        fig = asset_figure(engine.basket(weights), selected_date=args.date, reference_unit=unit)
    elif len(args.asset_id) == 1 and not args.compare:
        fig = asset_figure(engine.single(args.asset_id[0]), selected_date=args.date, reference_unit=unit)
    elif args.asset_id:
        asset_ids = _select_compared(cfg, args.asset_id)
        if asset_ids is None:
            return 2
        result = engine.compare(asset_ids, start=args.start, end=args.end)
        fig = comparison_figure(result, view_mode=args.view, selected_date=args.date)
    else:
        logger.error("chart needs --asset-id or --weight")
        return 2

    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out))
    print(f"chart -> {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lambdic")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_single = sub.add_parser("single", help="Print one asset's merged series")
    p_single.add_argument("--config", required=True, help="Path to YAML catalog")
    p_single.add_argument("--asset-id", required=True)
    p_single.set_defaults(func=_cmd_single)

    p_basket = sub.add_parser("basket", help="Print a weighted basket composite")
    p_basket.add_argument("--config", required=True, help="Path to YAML catalog")
    p_basket.add_argument(
        "--weight", action="append", type=_parse_weight, required=True, help="ASSET=PERCENT, repeat per member"
    )
    p_basket.set_defaults(func=_cmd_basket)

    p_cmp = sub.add_parser("compare", help="Print baseline-normalized series side by side")
    p_cmp.add_argument("--config", required=True, help="Path to YAML catalog")
    p_cmp.add_argument("--asset-id", action="append", required=True)
    p_cmp.add_argument("--start", type=parse_date, default=None, help="ISO date, e.g. 2021-01-01")
    p_cmp.add_argument("--end", type=parse_date, default=None, help="ISO date, e.g. 2024-12-31")
    p_cmp.set_defaults(func=_cmd_compare)

    p_ins = sub.add_parser("insights", help="Summarize performance in the reference unit")
    p_ins.add_argument("--config", required=True, help="Path to YAML catalog")
    p_ins.add_argument("--asset-id", required=True)
    p_ins.add_argument("--date", type=parse_date, default=None, help="Selected ISO date")
    p_ins.set_defaults(func=_cmd_insights)

    p_chart = sub.add_parser("chart", help="Write an HTML chart")
    p_chart.add_argument("--config", required=True, help="Path to YAML catalog")
    p_chart.add_argument("--asset-id", action="append", default=[])
    p_chart.add_argument("--weight", action="append", type=_parse_weight, default=[], help="ASSET=PERCENT for a basket chart")
    p_chart.add_argument("--compare", action="store_true", help="Normalized comparison even for one asset")
    p_chart.add_argument("--view", choices=["overlay", "separate"], default="overlay")
    p_chart.add_argument("--start", type=parse_date, default=None)
    p_chart.add_argument("--end", type=parse_date, default=None)
    p_chart.add_argument("--date", type=parse_date, default=None, help="Selected ISO date marker")
    p_chart.add_argument("--output", required=True, help="Output .html path")
    p_chart.set_defaults(func=_cmd_chart)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
