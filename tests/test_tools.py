import json
from pytest import approx

from insura.agent.tools import TOOLS, dispatch, format_inr, tool_definitions
from insura.parsing.amount_parser import PARSE_FAILURE_MESSAGE
from insura.utils.events import read_events

APPLICANT = {"name": "Rakesh", "mobile": "9876543210", "email": "rakesh@example.com"}


def test_validate_field_tool():
    assert dispatch("validate_field", {"fieldType": "mobile", "value": "9876543210"}) == {
        "isValid": True, "errorMessage": "Mobile number must be exactly 10 digits",
    }
    assert dispatch("validate_field", {"fieldType": "age", "value": 130})["isValid"] is False


def test_validate_field_rejects_unknown_type():
    res = dispatch("validate_field", {"fieldType": "pan", "value": "X"})
    assert res["isValid"] is False
    assert res["details"]


def test_parse_amount_tool():
    assert dispatch("parse_amount", {"amountText": "12 lakhs"}) == {"success": True, "amount": 1_200_000}
    assert dispatch("parse_amount", '{"amountText": "abc"}') == {"success": False, "error": PARSE_FAILURE_MESSAGE}


def test_individual_premium_tool():
    res = dispatch("calculate_individual_premium", {
        **APPLICANT, "city": "Mumbai", "age": 25, "gender": "Male", "amountInsured": 1_000_000,
    })
    assert res["success"] is True
    p = res["premium"]
    assert p["memberPremium"] == approx(6600.0)
    assert p["gst"] == approx(1188.0)
    assert p["total"] == approx(7788.0)
    assert p["totalInWords"] == "seven thousand seven hundred eighty eight"
    assert "Amount Insured: ₹1,000,000" in res["summary"]
    assert "GST (18%): ₹1,188" in res["summary"]
    assert res["summary"].endswith("The total premium is Rs. seven thousand seven hundred eighty eight")


def test_family_premium_tool():
    res = dispatch("calculate_family_premium", {
        **APPLICANT, "city": "Pune", "husbandAge": 35, "wifeAge": 32,
        "sons": [{"age": 5}], "daughters": [], "amountInsured": 1_000_000,
    })
    assert res["success"] is True
    p = res["premium"]
    assert p["total"] == approx(20310.75)
    assert p["memberCount"] == 3
    # words are spoken for the rounded total
    assert p["totalInWords"] == "twenty thousand three hundred eleven"
    assert "Sons: 1 (ages: 5)" in res["summary"]
    assert "Daughters: 0" in res["summary"]
    assert "Family Discount (10%): ₹1,912.5" in res["summary"]


def test_numeric_strings_are_not_coerced():
    res = dispatch("calculate_individual_premium", {
        **APPLICANT, "city": "Delhi", "age": "35", "gender": "Female", "amountInsured": 500000,
    })
    assert res["success"] is False
    assert res["error"] == "Failed to calculate individual premium"
    assert any(d.startswith("age:") for d in res["details"])


def test_bad_family_arguments():
    res = dispatch("calculate_family_premium", {
        **APPLICANT, "city": "Pune", "husbandAge": 35, "wifeAge": 0,
        "sons": [], "daughters": [], "amountInsured": -1, "extra": True,
    })
    assert res["success"] is False
    assert res["error"] == "Failed to calculate family premium"
    fields = {d.split(":")[0] for d in res["details"]}
    assert {"wifeAge", "amountInsured", "extra"} <= fields


def test_convert_number_to_words_tool():
    assert dispatch("convert_number_to_words", {"number": 20310.75}) == {"words": "twenty thousand three hundred eleven"}
    assert dispatch("convert_number_to_words", {"number": 0}) == {"words": "zero"}


def test_unknown_tool_and_bad_json():
    assert dispatch("book_policy", {}) == {"success": False, "error": "Unknown tool: book_policy"}
    res = dispatch("parse_amount", "{not json")
    assert res["success"] is False


def test_events_recorded_without_personal_data():
    dispatch("calculate_individual_premium", {
        **APPLICANT, "city": "Mumbai", "age": 25, "gender": "Male", "amountInsured": 1_000_000,
    })
    dispatch("parse_amount", {"amountText": "abc"})
    evs = read_events("tool.invoked")
    assert [e["payload"]["tool"] for e in evs] == ["calculate_individual_premium", "parse_amount"]
    assert [e["payload"]["success"] for e in evs] == [True, False]
    assert "Rakesh" not in json.dumps(evs)


def test_events_can_be_disabled():
    dispatch("parse_amount", {"amountText": "5k"}, cfg={"events_enabled": False})
    assert read_events() == []


def test_tool_definitions_expose_camel_case_schemas():
    defs = {d["name"]: d for d in tool_definitions()}
    assert set(defs) == set(TOOLS) == {
        "validate_field", "parse_amount", "calculate_individual_premium",
        "calculate_family_premium", "convert_number_to_words",
    }
    family = defs["calculate_family_premium"]["parameters"]
    assert {"husbandAge", "wifeAge", "sons", "daughters", "amountInsured"} <= set(family["properties"])
    assert "amountInsured" in family["required"]


def test_format_inr():
    assert format_inr(1_200_000.0) == "1,200,000"
    assert format_inr(3098.25) == "3,098.25"
    assert format_inr(0) == "0"


INDIVIDUAL = {**APPLICANT, "city": "Mumbai", "age": 25, "gender": "Male", "amountInsured": 1_000_000}


def test_bad_pricing_config_is_a_failure_record(capsys):
    res = dispatch("calculate_individual_premium", INDIVIDUAL, cfg={"pricing_strategy": "llm"})
    assert res["success"] is False
    assert res["error"] == "Failed to calculate individual premium"
    assert "Unknown pricing strategy: llm" in res["details"][0]

    res = dispatch("calculate_family_premium", {
        **APPLICANT, "city": "Pune", "husbandAge": 35, "wifeAge": 32, "amountInsured": 1_000_000,
    }, cfg={"pricing_strategy": "rules", "rating": {"gst_rate": -1}})
    assert res["success"] is False
    assert "gst_rate" in res["details"][0]
    assert "[dispatch] suppressed" in capsys.readouterr().out


def test_non_object_arguments():
    res = dispatch("parse_amount", 5)
    assert res["success"] is False
    assert res["details"][0].startswith("$: arguments must be a JSON object")
    assert dispatch("convert_number_to_words", "[1, 2]")["success"] is False


def test_gender_with_padding_rejected():
    res = dispatch("calculate_individual_premium", {**INDIVIDUAL, "gender": " male"})
    assert res["success"] is False
    assert any(d.startswith("gender:") for d in res["details"])
