# pricing_engine.py
from typing import Optional, Protocol, Sequence

from insura.pricing.pricing_contracts import (
    ChildAge,
    FamilyPremiumInput,
    FamilyPremiumResult,
    IndividualPremiumInput,
    IndividualPremiumResult,
    RatingTable,
    round_money,
)


class Pricer(Protocol):
    def price_individual(self, s: IndividualPremiumInput) -> IndividualPremiumResult: ...
    def price_family(self, s: FamilyPremiumInput) -> FamilyPremiumResult: ...


class RulesPricer:
    """
    Factor-based health premium: sum insured x base rate x age x city x gender,
    then family discount and GST. Factors come from a RatingTable so the
    constants can be overridden from config without touching the formula.
    """
    def __init__(self, rating: Optional[RatingTable] = None):
        self.rating = rating or RatingTable()

    def age_factor(self, age: float) -> float:
        r = self.rating
        if age < r.young_age_limit:
            return r.young_factor
        if r.young_age_limit <= age <= r.middle_age_limit:
            return r.middle_factor
        return r.senior_factor

    def city_factor(self, city: str) -> float:
        return self.rating.city_factors.get((city or "").lower(), self.rating.default_city_factor)

    def gender_factor(self, gender: str) -> float:
        # anything other than male prices at the female factor
        return self.rating.male_factor if (gender or "").lower() == "male" else self.rating.female_factor

    def member_premium(self, age: float, gender: str, city: str, amount_insured: float) -> float:
        base = amount_insured * self.rating.base_rate
        return base * self.age_factor(age) * self.city_factor(city) * self.gender_factor(gender)

    def price_individual(self, s: IndividualPremiumInput) -> IndividualPremiumResult:
        premium = self.member_premium(s.age, s.gender, s.city, s.amount_insured)
        gst = premium * self.rating.gst_rate
        total = premium + gst
        return IndividualPremiumResult(
            member_premium=round_money(premium),
            gst=round_money(gst),
            total=round_money(total),
        )

    def price_family(self, s: FamilyPremiumInput) -> FamilyPremiumResult:
        premiums = [
            self.member_premium(m.age, m.gender, s.city, s.amount_insured)
            for m in s.members()
        ]
        total_member_premiums = sum(premiums)
        discounted = total_member_premiums * (1.0 - self.rating.family_discount)
        gst = discounted * self.rating.gst_rate
        total = discounted + gst
        return FamilyPremiumResult(
            total_member_premiums=round_money(total_member_premiums),
            discounted=round_money(discounted),
            gst=round_money(gst),
            total=round_money(total),
            member_count=len(premiums),
            member_premiums=[round_money(p) for p in premiums],
        )


_DEFAULT_PRICER = RulesPricer()


def calculate_individual_premium(age: int, gender: str, city: str, amount_insured: float) -> IndividualPremiumResult:
    return _DEFAULT_PRICER.price_individual(IndividualPremiumInput(age, gender, city, amount_insured))


def calculate_family_premium(
    husband_age: int,
    wife_age: int,
    sons: Sequence[ChildAge],
    daughters: Sequence[ChildAge],
    city: str,
    amount_insured: float,
) -> FamilyPremiumResult:
    return _DEFAULT_PRICER.price_family(
        FamilyPremiumInput(husband_age, wife_age, list(sons), list(daughters), city, amount_insured)
    )
