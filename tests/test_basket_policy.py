import math

import pytest

from lambdic.basket import BasketPolicyError, BasketSelection, check_basket
from lambdic.config import AssetSpec, LimitsConfig, ProjectConfig


def _cfg(max_members=5):
    return ProjectConfig(
        assets=[AssetSpec(asset_id=a, name=a.upper()) for a in ("gold", "oil", "cpi", "sp500", "us100", "mstr")],
        limits=LimitsConfig(max_basket_members=max_members),
    )


def test_check_basket_accepts_weights_totalling_100():
    result = check_basket({"gold": 60.0, "oil": 40.0}, _cfg())

    assert result.is_valid
    assert result.weights_balanced
    assert result.warnings == []
    assert math.isclose(result.total_weight, 100.0)


def test_check_basket_only_warns_when_total_is_not_100():
    result = check_basket({"gold": 60.0, "oil": 20.0}, _cfg())

    assert result.is_valid
    assert not result.weights_balanced
    assert "80.0%" in result.warnings[0]


def test_check_basket_tolerates_rounding_below_tolerance():
    result = check_basket({"gold": 33.333, "oil": 33.333, "cpi": 33.337}, _cfg())

    assert result.weights_balanced


def test_check_basket_errors_on_too_many_members_or_none():
    too_many = check_basket({a: 20.0 for a in ("gold", "oil", "cpi")}, _cfg(max_members=2))
    empty = check_basket({}, _cfg())

    assert not too_many.is_valid
    assert "maximum 2" in too_many.errors[0]
    assert not empty.is_valid


def test_check_basket_warns_on_unknown_assets():
    result = check_basket({"gold": 50.0, "silver": 50.0}, _cfg())

    assert result.is_valid
    assert any("silver" in w for w in result.warnings)


def test_selection_add_rules():
    sel = BasketSelection(limits=LimitsConfig(max_basket_members=2)).add("gold", 50.0)

    with pytest.raises(BasketPolicyError, match="select an asset"):
        sel.add("", 10.0)
    with pytest.raises(BasketPolicyError, match="valid weight"):
        sel.add("oil", 0.0)
    with pytest.raises(BasketPolicyError, match="already in basket"):
        sel.add("gold", 10.0)

    sel = sel.add("oil", 50.0)
    with pytest.raises(BasketPolicyError, match="Maximum 2"):
        sel.add("cpi", 10.0)

    assert sel.as_dict() == {"gold": 50.0, "oil": 50.0}
    assert sel.total_weight == 100.0


def test_selection_update_and_remove():
    sel = BasketSelection().add("gold", 50.0).add("oil", 50.0)

    assert sel.update_weight("gold", 70.0).as_dict() == {"gold": 70.0, "oil": 50.0}
    assert sel.update_weight("gold", -1.0) is sel
    assert sel.update_weight("gold", float("nan")) is sel
    assert sel.remove("gold").as_dict() == {"oil": 50.0}
