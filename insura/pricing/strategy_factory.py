# pricing/strategy_factory.py
from typing import Optional

from insura.pricing.pricing_contracts import RatingTable
from insura.pricing.pricing_engine import RulesPricer


def get_pricer(name: str = "rules", rating: Optional[RatingTable] = None):
    if name == "rules":
        return RulesPricer(rating)
    raise ValueError(f"Unknown pricing strategy: {name}")
