import pytest

from lambdic import load_config
from lambdic.cli import _select_compared, main


def _write_catalog(tmp_path):
    (tmp_path / "a_historical.csv").write_text(
        "date,price\n2020-01-01,10\n2020-02-01,20\n", encoding="utf-8"
    )
    (tmp_path / "b_historical.csv").write_text(
        "date,price\n2020-01-01,5\n2020-02-01,5\n", encoding="utf-8"
    )
    (tmp_path / "a_btc.csv").write_text(
        "date,median,p25,p75\n2020-03-01,22,18,26\n", encoding="utf-8"
    )
    path = tmp_path / "catalog.yaml"
    path.write_text(
        """
assets:
  - asset_id: a
    name: Asset A
    historical:
      source: {type: csv, path: a_historical.csv}
    forecast:
      source: {type: csv, path: a_btc.csv}
  - asset_id: b
    name: Asset B
    historical:
      source: {type: csv, path: b_historical.csv}
limits:
  max_basket_members: 2
""",
        encoding="utf-8",
    )
    return str(path)


def test_basket_command_prints_composite(tmp_path, capsys):
    config = _write_catalog(tmp_path)

    code = main(["basket", "--config", config, "--weight", "a=50", "--weight", "b=50"])

    out = capsys.readouterr().out
    assert code == 0
    assert "7.5" in out
    assert "12.5" in out
    assert "2020-03-01" not in out


def test_basket_command_rejects_too_many_members(tmp_path):
    config = _write_catalog(tmp_path)

    code = main(
        ["basket", "--config", config, "--weight", "a=40", "--weight", "b=40", "--weight", "c=20"]
    )

    assert code == 2


def test_basket_command_rejects_malformed_weight(tmp_path):
    config = _write_catalog(tmp_path)

    with pytest.raises(SystemExit):
        main(["basket", "--config", config, "--weight", "a:50"])


def test_compare_command_prints_overlay(tmp_path, capsys):
    config = _write_catalog(tmp_path)

    code = main(["compare", "--config", config, "--asset-id", "a", "--asset-id", "b", "--start", "2020-02-01"])

    out = capsys.readouterr().out
    assert code == 0
    assert "a_actual" in out
    assert "2020-01-01" not in out
    assert "2020-03-01" in out


def test_insights_command(tmp_path, capsys):
    config = _write_catalog(tmp_path)

    code = main(["insights", "--config", config, "--asset-id", "a", "--date", "2020-02-01"])

    out = capsys.readouterr().out
    assert code == 0
    assert "100.00%" in out
    assert "Asset A" in out


def test_chart_command_writes_html(tmp_path, capsys):
    config = _write_catalog(tmp_path)
    output = tmp_path / "out" / "chart.html"

    code = main(["chart", "--config", config, "--asset-id", "a", "--output", str(output)])

    assert code == 0
    assert output.exists()
    assert "chart ->" in capsys.readouterr().out


def test_compare_command_enforces_asset_cap(tmp_path):
    config = _write_catalog(tmp_path)
    args = ["compare", "--config", config]
    for asset_id in ("a", "b", "c", "d", "e", "f"):
        args += ["--asset-id", asset_id]

    assert main(args) == 2


def test_chart_command_enforces_asset_cap(tmp_path):
    config = _write_catalog(tmp_path)
    output = tmp_path / "chart.html"
    args = ["chart", "--config", config, "--output", str(output)]
    for asset_id in ("a", "b", "c", "d", "e", "f"):
        args += ["--asset-id", asset_id]

    assert main(args) == 2
    assert not output.exists()


def test_repeated_asset_ids_are_selected_once(tmp_path):
    cfg = load_config(_write_catalog(tmp_path))

    assert _select_compared(cfg, ["a", "a", "b"]) == ("a", "b")
