# pricing_contracts.py
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Union

ChildAge = Union[int, Mapping[str, Any]]


def round_money(value: float) -> float:
    """Round to 2 decimals, ties toward +infinity (never banker's rounding)."""
    return math.floor(value * 100 + 0.5) / 100


def _default_city_factors() -> Dict[str, float]:
    return {
        "mumbai": 1.2,
        "delhi": 1.2,
        "gurugram": 1.0,
        "gurgaon": 1.0,
        "bangalore": 1.0,
        "chennai": 1.0,
    }


@dataclass(frozen=True)
class RatingTable:
    base_rate: float = 0.005          # share of sum insured per member
    young_age_limit: int = 30         # age below this -> young_factor
    middle_age_limit: int = 49        # young_age_limit..this (inclusive) -> middle_factor
    young_factor: float = 1.0
    middle_factor: float = 1.5
    senior_factor: float = 2.0
    city_factors: Dict[str, float] = field(default_factory=_default_city_factors)
    default_city_factor: float = 0.9
    male_factor: float = 1.1
    female_factor: float = 1.0
    family_discount: float = 0.10
    gst_rate: float = 0.18
    currency: str = "INR"

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "RatingTable":
        """Overlay known keys from a plain dict on the defaults; unknown keys are ignored."""
        known = {f.name for f in fields(RatingTable)}
        kwargs = {k: v for k, v in (d or {}).items() if k in known}
        if "city_factors" in kwargs:
            kwargs["city_factors"] = {str(k).strip().lower(): float(v) for k, v in kwargs["city_factors"].items()}
        return RatingTable(**kwargs)


@dataclass(frozen=True)
class Member:
    age: int
    gender: str                       # "Male" | "Female"


@dataclass
class IndividualPremiumInput:
    age: int
    gender: str
    city: str
    amount_insured: float             # per-person sum insured


def _child_age(child: ChildAge) -> int:
    if isinstance(child, Mapping):
        return child["age"]
    return child


@dataclass
class FamilyPremiumInput:
    husband_age: int
    wife_age: int
    sons: Sequence[ChildAge] = field(default_factory=list)
    daughters: Sequence[ChildAge] = field(default_factory=list)
    city: str = ""
    amount_insured: float = 0.0       # applied to every member, not a shared floater

    def members(self) -> Iterator[Member]:
        yield Member(self.husband_age, "Male")
        yield Member(self.wife_age, "Female")
        for son in self.sons:
            yield Member(_child_age(son), "Male")
        for daughter in self.daughters:
            yield Member(_child_age(daughter), "Female")

    @property
    def member_count(self) -> int:
        return 2 + len(self.sons) + len(self.daughters)


@dataclass(frozen=True)
class IndividualPremiumResult:
    member_premium: float
    gst: float
    total: float

    def to_payload(self) -> Dict[str, Any]:
        return {"memberPremium": self.member_premium, "gst": self.gst, "total": self.total}


@dataclass(frozen=True)
class FamilyPremiumResult:
    total_member_premiums: float
    discounted: float
    gst: float
    total: float
    member_count: int
    member_premiums: List[float] = field(default_factory=list)   # rounded, same order as members()

    @property
    def family_discount(self) -> float:
        return round_money(self.total_member_premiums - self.discounted)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalMemberPremiums": self.total_member_premiums,
            "discounted": self.discounted,
            "gst": self.gst,
            "total": self.total,
            "memberCount": self.member_count,
        }
