from datetime import datetime
from typing import Optional

from market_data import (
    AGE_BANDS,
    AMENITY_BASE,
    BUILDING_BASE,
    BUILDING_HEIGHT_BANDS,
    BUILDING_TYPE_POINTS,
    CITY_TIER_RULES,
    CONDITION_POINTS,
    CRAMPED_SIZE_SCORE,
    DEFAULT_CITY_TIER,
    DEFAULT_GROWTH,
    DEFAULT_RENT_RATE,
    DEFAULT_SALE_RATE,
    DEFAULT_VOLATILITY,
    DISTRICT_RULES,
    ERA_BANDS,
    EXTREME_PRICE_DELTA,
    EXTREME_PRICE_SCORE,
    FLOOR_BANDS,
    GROWTH_RULES,
    LABEL_THRESHOLDS,
    LOWEST_LABEL,
    MODERN_MIN_FLOORS,
    NEGATIVE_AMENITIES,
    OLDEST_AGE_POINTS,
    POSITIVE_AMENITIES,
    PRICE_BAND_DELTAS,
    PRICE_BAND_SCORES,
    RENT_RATE_RULES,
    SALE_RATE_RULES,
    SIZE_BANDS,
    TALLEST_BUILDING_POINTS,
    TOP_FLOOR_POINTS,
    VOLATILITY_RULES,
    first_match,
)


def clamp(value: float, low: float = 1, high: float = 10) -> float:
    return max(low, min(high, value))


def _upper_band(value, bands, fallback):
    for upper, points in bands:
        if value < upper:
            return points
    return fallback


def _inclusive_band(value, bands, fallback):
    for upper, points in bands:
        if value <= upper:
            return points
    return fallback


def _lower_band(value, bands, fallback):
    for minimum, points in bands:
        if value >= minimum:
            return points
    return fallback


# --------------------
# PRICE
# --------------------

def expected_price_per_sqm(city: str, property_type: str) -> float:
    """Monthly rent or sale price per m2 a listing in this city should ask."""
    if property_type == "rent":
        return first_match(city, RENT_RATE_RULES, DEFAULT_RENT_RATE)
    return first_match(city, SALE_RATE_RULES, DEFAULT_SALE_RATE)


def price_band_delta(price_ratio: float) -> float:
    return _upper_band(price_ratio, PRICE_BAND_DELTAS, EXTREME_PRICE_DELTA)


def price_score(price_ratio: float) -> float:
    return _upper_band(price_ratio, PRICE_BAND_SCORES, EXTREME_PRICE_SCORE)


# --------------------
# LOCATION
# --------------------

def location_score(city: str, district: str) -> float:
    score = first_match(city, CITY_TIER_RULES, DEFAULT_CITY_TIER)

    district_rules = first_match(city, DISTRICT_RULES, ())
    score += first_match(district, district_rules, 0.0)

    return clamp(score)


def regional_growth_factor(city: str) -> float:
    return first_match(city, GROWTH_RULES, DEFAULT_GROWTH)


def market_volatility_factor(city: str, property_type: str) -> float:
    rent, sale = first_match(city, VOLATILITY_RULES, DEFAULT_VOLATILITY)
    return rent if property_type == "rent" else sale


# --------------------
# BUILDING
# --------------------

def building_score(
    building_type: str,
    condition: str,
    year_built: int,
    floor: int,
    total_floors: int,
    current_year: Optional[int] = None,
) -> float:
    current_year = current_year or datetime.now().year
    score = BUILDING_BASE

    score += BUILDING_TYPE_POINTS.get(building_type, 0.0)
    score += CONDITION_POINTS.get(condition, 0.0)

    age = current_year - year_built
    score += _inclusive_band(age, AGE_BANDS, OLDEST_AGE_POINTS)

    score += _inclusive_band(floor, FLOOR_BANDS, TOP_FLOOR_POINTS)
    score += _inclusive_band(total_floors, BUILDING_HEIGHT_BANDS, TALLEST_BUILDING_POINTS)

    era_points = _lower_band(year_built, ERA_BANDS, 0.0)
    if year_built >= ERA_BANDS[0][0] and total_floors < MODERN_MIN_FLOORS:
        era_points = 0.0
    score += era_points

    return clamp(score)


# --------------------
# AMENITIES
# --------------------

def matched_amenities(description: str):
    """Return (positive, negative) keyword groups found in the description."""
    text = (description or "").lower()
    positive = [
        (keywords, points) for keywords, points in POSITIVE_AMENITIES
        if any(k in text for k in keywords)
    ]
    negative = [
        (keywords, points) for keywords, points in NEGATIVE_AMENITIES
        if any(k in text for k in keywords)
    ]
    return positive, negative


def amenity_score(description: str) -> float:
    positive, negative = matched_amenities(description)
    score = AMENITY_BASE
    score += sum(points for _, points in positive)
    score += sum(points for _, points in negative)
    return clamp(score)


# --------------------
# SIZE
# --------------------

def size_efficiency(size: float, rooms: int) -> float:
    if rooms == 0:
        return CRAMPED_SIZE_SCORE

    return _lower_band(size / rooms, SIZE_BANDS, CRAMPED_SIZE_SCORE)


# --------------------
# LABEL
# --------------------

def label_for(score: float) -> str:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return LOWEST_LABEL
