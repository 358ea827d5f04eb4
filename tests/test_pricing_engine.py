from pytest import approx
import pytest

from insura.pricing.pricing_contracts import FamilyPremiumInput, RatingTable, round_money
from insura.pricing.pricing_engine import (
    RulesPricer,
    calculate_family_premium,
    calculate_individual_premium,
)
from insura.pricing.strategy_factory import get_pricer


def test_individual_young_male_mumbai():
    res = calculate_individual_premium(age=25, gender="Male", city="Mumbai", amount_insured=1_000_000)
    assert res.member_premium == approx(6600.00)
    assert res.gst == approx(1188.00)
    assert res.total == approx(7788.00)
    assert res.to_payload() == {"memberPremium": res.member_premium, "gst": res.gst, "total": res.total}


def test_family_with_one_son_in_pune():
    res = calculate_family_premium(35, 32, [{"age": 5}], [], "Pune", 1_000_000)
    # 7425 + 6750 + 4950
    assert res.total_member_premiums == approx(19125.00)
    assert res.discounted == approx(17212.50)
    assert res.gst == approx(3098.25)
    assert res.total == approx(20310.75)
    assert res.member_count == 3
    assert res.family_discount == approx(1912.50)
    assert res.member_premiums == [approx(7425.0), approx(6750.0), approx(4950.0)]


def test_daughters_priced_as_female_and_counted():
    res = calculate_family_premium(40, 38, [], [10, 12], "Delhi", 500_000)
    assert res.member_count == 4
    # husband 2500*1.5*1.2*1.1, wife 2500*1.5*1.2, two daughters 2500*1.0*1.2
    assert res.total_member_premiums == approx(4950 + 4500 + 3000 + 3000)


def test_order_of_children_does_not_change_total():
    a = calculate_family_premium(45, 44, [3, 17], [9], "Chennai", 700_000)
    b = calculate_family_premium(45, 44, [17, 3], [9], "Chennai", 700_000)
    assert a.total == b.total


def test_factor_bands():
    p = RulesPricer()
    assert p.age_factor(29) == 1.0
    assert p.age_factor(30) == 1.5
    assert p.age_factor(49) == 1.5
    assert p.age_factor(50) == 2.0
    assert p.city_factor("DELHI") == 1.2
    assert p.city_factor("gurgaon") == 1.0
    assert p.city_factor("Bangalore") == 1.0
    assert p.city_factor("Pune") == 0.9
    assert p.gender_factor("male") == 1.1
    assert p.gender_factor("Female") == 1.0


def test_gst_uses_unrounded_member_premium():
    res = calculate_individual_premium(20, "Female", "Chennai", 1_000_005)
    raw = 1_000_005 * 0.005          # 5000.025
    assert res.member_premium == round_money(raw)
    assert res.total == approx(5900.03)
    # pricing GST on the already rounded premium lands on a different paisa
    assert res.total != round_money(round_money(raw) * 1.18)


def test_outputs_non_negative_and_repeatable():
    first = calculate_family_premium(60, 55, [30], [28], "Kolkata", 2_500_000)
    second = calculate_family_premium(60, 55, [30], [28], "Kolkata", 2_500_000)
    assert first == second
    assert min(first.total_member_premiums, first.discounted, first.gst, first.total) >= 0


def test_round_money_half_up():
    assert round_money(0.125) == 0.13
    assert round_money(17212.5) == 17212.5


def test_custom_rating_table():
    table = RatingTable(gst_rate=0.0, family_discount=0.0, city_factors={"pune": 1.0})
    res = get_pricer("rules", table).price_family(FamilyPremiumInput(25, 25, [], [], "Pune", 100_000))
    assert res.total == approx(500 * 1.1 + 500)


def test_unknown_strategy():
    with pytest.raises(ValueError):
        get_pricer("llm")
