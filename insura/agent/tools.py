# insura/agent/tools.py
"""
Tool layer between the voice-agent runtime and the pricing core.

The runtime sends a tool name plus JSON arguments; `dispatch` validates the
arguments against the tool's pydantic model, calls the pure functions and
returns a JSON-shaped dict. Bad arguments come back as failure records so
the agent can re-ask the user instead of crashing the session.
"""
from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from insura.agent.models import (
    FamilyPremiumArgs,
    IndividualPremiumArgs,
    NumberToWordsArgs,
    ParseAmountArgs,
    ValidateFieldArgs,
)
from insura.config import get_config, get_rating_table
from insura.parsing.amount_parser import PARSE_FAILURE_MESSAGE, ParseError, parse_amount
from insura.pricing.pricing_contracts import FamilyPremiumInput, IndividualPremiumInput
from insura.pricing.strategy_factory import get_pricer
from insura.speech.number_words import number_to_words, round_half_up
from insura.utils import events
from insura.validation.field_validator import validate_field


def format_inr(amount: float) -> str:
    """Grouped thousands, at most 3 decimals, no trailing zeros: 1200000.0 -> '1,200,000'."""
    return f"{float(amount):,.3f}".rstrip("0").rstrip(".")


def _pct(rate: float) -> str:
    return f"{rate * 100:g}%"


def _ages(children: List[Any]) -> str:
    return ", ".join(str(c.age) for c in children)


def _children_line(label: str, children: List[Any]) -> str:
    if not children:
        return f"{label}: 0"
    return f"{label}: {len(children)} (ages: {_ages(children)})"


# ---------------- handlers ----------------

def _validate_field(args: ValidateFieldArgs, cfg: Dict[str, Any]) -> Dict[str, Any]:
    return validate_field(args.field_type, args.value).to_payload()


def _parse_amount(args: ParseAmountArgs, cfg: Dict[str, Any]) -> Dict[str, Any]:
    try:
        return {"success": True, "amount": parse_amount(args.amount_text)}
    except ParseError:
        return {"success": False, "error": PARSE_FAILURE_MESSAGE}


def _individual_premium(args: IndividualPremiumArgs, cfg: Dict[str, Any]) -> Dict[str, Any]:
    pricer = get_pricer(cfg["pricing_strategy"], get_rating_table(cfg))
    res = pricer.price_individual(
        IndividualPremiumInput(args.age, args.gender, args.city, args.amount_insured)
    )
    words = number_to_words(round_half_up(res.total))
    summary = "\n".join([
        "Individual Premium Calculation:",
        f"Name: {args.name}",
        f"Mobile: {args.mobile}",
        f"Email: {args.email}",
        f"City: {args.city}",
        f"Age: {args.age}",
        f"Gender: {args.gender}",
        f"Amount Insured: ₹{format_inr(args.amount_insured)}",
        "",
        "Premium Breakdown:",
        f"Member Premium: ₹{format_inr(res.member_premium)}",
        f"GST ({_pct(pricer.rating.gst_rate)}): ₹{format_inr(res.gst)}",
        f"Total Premium: ₹{format_inr(res.total)}",
        "",
        f"The total premium is Rs. {words}",
    ])
    return {
        "success": True,
        "premium": {**res.to_payload(), "totalInWords": words},
        "summary": summary,
    }


def _family_premium(args: FamilyPremiumArgs, cfg: Dict[str, Any]) -> Dict[str, Any]:
    pricer = get_pricer(cfg["pricing_strategy"], get_rating_table(cfg))
    res = pricer.price_family(FamilyPremiumInput(
        husband_age=args.husband_age,
        wife_age=args.wife_age,
        sons=[c.age for c in args.sons],
        daughters=[c.age for c in args.daughters],
        city=args.city,
        amount_insured=args.amount_insured,
    ))
    words = number_to_words(round_half_up(res.total))
    summary = "\n".join([
        "Family Premium Calculation:",
        f"Primary Contact: {args.name}",
        f"Mobile: {args.mobile}",
        f"Email: {args.email}",
        f"City: {args.city}",
        f"Husband Age: {args.husband_age}",
        f"Wife Age: {args.wife_age}",
        _children_line("Sons", args.sons),
        _children_line("Daughters", args.daughters),
        f"Amount Insured: ₹{format_inr(args.amount_insured)}",
        "",
        "Premium Breakdown:",
        f"Total Member Premiums: ₹{format_inr(res.total_member_premiums)}",
        f"Family Discount ({_pct(pricer.rating.family_discount)}): ₹{format_inr(res.family_discount)}",
        f"Discounted Amount: ₹{format_inr(res.discounted)}",
        f"GST ({_pct(pricer.rating.gst_rate)}): ₹{format_inr(res.gst)}",
        f"Total Premium: ₹{format_inr(res.total)}",
        "",
        f"The total premium is Rs. {words}",
    ])
    return {
        "success": True,
        "premium": {**res.to_payload(), "totalInWords": words},
        "summary": summary,
    }


def _number_to_words(args: NumberToWordsArgs, cfg: Dict[str, Any]) -> Dict[str, Any]:
    return {"words": number_to_words(round_half_up(args.number))}


# ---------------- registry ----------------

@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    args_model: Type[BaseModel]
    handler: Callable[[Any, Dict[str, Any]], Dict[str, Any]]
    failure_message: str

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)

    def to_definition(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }

    def failure(self, details: List[str]) -> Dict[str, Any]:
        if self.name == "validate_field":
            # keep the shape the agent already reads for validation results
            return {"isValid": False, "errorMessage": self.failure_message, "details": details}
        return {"success": False, "error": self.failure_message, "details": details}


TOOLS: Dict[str, Tool] = {t.name: t for t in [
    Tool("validate_field", "Validate individual fields as they are collected",
         ValidateFieldArgs, _validate_field, "Unsupported field or value"),
    Tool("parse_amount", "Parse amount text to numeric value supporting various formats",
         ParseAmountArgs, _parse_amount, PARSE_FAILURE_MESSAGE),
    Tool("calculate_individual_premium", "Calculate health insurance premium for an individual",
         IndividualPremiumArgs, _individual_premium, "Failed to calculate individual premium"),
    Tool("calculate_family_premium", "Calculate health insurance premium for a family",
         FamilyPremiumArgs, _family_premium, "Failed to calculate family premium"),
    Tool("convert_number_to_words", "Convert a number to words for speech output",
         NumberToWordsArgs, _number_to_words, "Failed to convert number to words"),
]}


def tool_definitions() -> List[Dict[str, Any]]:
    return [t.to_definition() for t in TOOLS.values()]


def _error_details(e: ValidationError) -> List[str]:
    return [f"{'.'.join(str(p) for p in err['loc']) or '$'}: {err['msg']}" for err in e.errors()]


def _record(name: str, result: Dict[str, Any], started: float, cfg: Dict[str, Any]) -> None:
    if not cfg.get("events_enabled", True):
        return
    # an invalid field value is still a successful validate_field call
    ok = "error" not in result and "details" not in result
    try:
        events.publish("tool.invoked", {
            "tool": name,
            "success": ok,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        })
    except OSError as e:
        print("[dispatch] suppressed:", repr(e))


def dispatch(
    name: str,
    arguments: Union[str, Mapping[str, Any], None],
    cfg: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Run one tool call. `arguments` may be the raw JSON string the runtime sends
    or an already-decoded mapping. Never raises for bad input.
    """
    started = time.perf_counter()
    cfg = cfg if cfg is not None else get_config()
    tool = TOOLS.get(name)
    if tool is None:
        result = {"success": False, "error": f"Unknown tool: {name}"}
        _record(name, result, started, cfg)
        return result

    try:
        raw = json.loads(arguments) if isinstance(arguments, str) else dict(arguments or {})
        args = tool.args_model.model_validate(raw)
    except json.JSONDecodeError as e:
        result = tool.failure([f"$: invalid JSON ({e.msg})"])
    except ValidationError as e:
        result = tool.failure(_error_details(e))
    except (TypeError, ValueError) as e:
        result = tool.failure([f"$: arguments must be a JSON object ({e})"])
    else:
        try:
            result = tool.handler(args, cfg)
        except (TypeError, ValueError, KeyError) as e:
            # bad pricing strategy or rating config; reported per call, not raised
            print("[dispatch] suppressed:", repr(e))
            result = tool.failure([str(e)])

    _record(name, result, started, cfg)
    return result
