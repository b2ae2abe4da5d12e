"""
Market decoration for extended analyses.

Platform figures are generated from the static price baseline and a random
listing count. They are illustrative only and flagged synthetic.
"""

import random
from typing import List, Optional

from market_data import CITY_TIER_RULES, DEFAULT_CITY_TIER, first_match
from models import MarketInsights, PlatformComparison, PriceRange
from services.scoring import regional_growth_factor

# (platform, variance against the baseline)
PLATFORMS = (
    ("OLX.uz", 0.97),
    ("Uybor.uz", 1.04),
    ("Realt24.uz", 1.10),
    ("Joymee.uz", 0.92),
)

LISTINGS_RANGE = (25, 350)
NEUTRAL_BAND = 0.05
PRICE_RANGE_FACTORS = (0.75, 1.35)


def compare_platforms(
    expected: float,
    price_per_sqm: float,
    rng: Optional[random.Random] = None,
) -> List[PlatformComparison]:
    rng = rng or random
    comparisons = []

    for platform, variance in PLATFORMS:
        average = round(expected * variance, 2)

        if price_per_sqm < average * (1 - NEUTRAL_BAND):
            position = "lower"
        elif price_per_sqm > average * (1 + NEUTRAL_BAND):
            position = "higher"
        else:
            position = "average"

        comparisons.append(PlatformComparison(
            platform=platform,
            average_price=average,
            listings_count=rng.randint(*LISTINGS_RANGE),
            price_position=position,
        ))

    return comparisons


def market_trend(city: str) -> str:
    growth = regional_growth_factor(city)

    if growth >= 0.5:
        return "Tez o'sib bormoqda - narxlar yillik 13% dan ortiq oshmoqda"
    if growth > 0:
        return "Barqaror o'sib bormoqda - narxlar asta-sekin oshmoqda"
    if growth == 0:
        return "Barqaror - narxlar o'zgarmayapti"
    return "Talab kamayib bormoqda - bitimlar soni qisqarmoqda"


def competition_level(city: str) -> str:
    tier = first_match(city, CITY_TIER_RULES, DEFAULT_CITY_TIER)

    if tier >= 9:
        return "Yuqori"
    if tier >= 7:
        return "O'rtacha"
    return "Past"


def market_insights(city: str, expected: float) -> MarketInsights:
    low, high = PRICE_RANGE_FACTORS
    return MarketInsights(
        average_price=expected,
        price_range=PriceRange(min=round(expected * low, 2), max=round(expected * high, 2)),
        market_trend=market_trend(city),
        competition=competition_level(city),
    )
