import logging
import random
from datetime import datetime
from typing import Optional

from market_data import (
    EXTENDED_WEIGHTS,
    EXTREME_PRICE_CEILING,
    EXTREME_PRICE_RATIO,
    JITTER,
    NEUTRAL_SCORE,
    SIMPLE_WEIGHTS,
)
from models import (
    AnalysisResult,
    ApartmentData,
    ExtendedAnalysisResult,
    FactorScore,
    Factors,
    PriceFactor,
)
from services import explanations
from services.market_insights import compare_platforms, market_insights
from services.scoring import (
    amenity_score,
    building_score,
    clamp,
    expected_price_per_sqm,
    label_for,
    location_score,
    market_volatility_factor,
    matched_amenities,
    price_band_delta,
    price_score,
    regional_growth_factor,
    size_efficiency,
)

logger = logging.getLogger(__name__)


class ApartmentScorer:
    def __init__(self, rng: Optional[random.Random] = None, current_year: Optional[int] = None):
        """rng drives jitter, template choice and synthetic listing counts"""
        self.rng = rng or random.Random()
        self.current_year = current_year or datetime.now().year

    def score_breakdown(self, data: ApartmentData) -> dict:
        """
        Compute every intermediate figure of an analysis

        Returns:
        {
            "price_per_sqm", "expected_price_per_sqm", "price_ratio",
            "price_score", "price_delta", "location", "building_quality",
            "amenities", "size_efficiency", "growth", "volatility",
            "weighted_sum": simple score before jitter and volatility
        }
        """
        price_per_sqm = data.price / data.size
        expected = expected_price_per_sqm(data.city, data.property_type)
        price_ratio = price_per_sqm / expected

        breakdown = {
            "price_per_sqm": price_per_sqm,
            "expected_price_per_sqm": expected,
            "price_ratio": price_ratio,
            "price_score": price_score(price_ratio),
            "price_delta": price_band_delta(price_ratio),
            "location": location_score(data.city, data.district),
            "building_quality": building_score(
                data.building_type, data.condition, data.year_built,
                data.floor, data.total_floors, current_year=self.current_year,
            ),
            "amenities": amenity_score(data.description),
            "size_efficiency": size_efficiency(data.size, data.rooms),
            "growth": regional_growth_factor(data.city),
            "volatility": market_volatility_factor(data.city, data.property_type),
        }

        weighted = NEUTRAL_SCORE + breakdown["price_delta"]
        for factor, weight in SIMPLE_WEIGHTS.items():
            weighted += (breakdown[factor] - NEUTRAL_SCORE) * weight
        weighted += breakdown["growth"]
        breakdown["weighted_sum"] = weighted

        return breakdown

    def _finalize(self, raw_score: float, price_ratio: float) -> float:
        if price_ratio >= EXTREME_PRICE_RATIO:
            raw_score = min(raw_score, EXTREME_PRICE_CEILING)
        return clamp(round(raw_score, 1))

    def analyze(self, data: ApartmentData) -> AnalysisResult:
        """Score with market noise and a randomly chosen label template."""
        b = self.score_breakdown(data)

        jitter = self.rng.uniform(-JITTER, JITTER)
        score = self._finalize(b["weighted_sum"] + b["volatility"] + jitter, b["price_ratio"])
        label = label_for(score)

        logger.info(
            f"Analyzed {data.property_type} in {data.city}: ratio={b['price_ratio']:.2f} "
            f"score={score} label={label}"
        )

        return AnalysisResult(
            score=score,
            label=label,
            explanation=explanations.explain(label, data, b["price_ratio"], rng=self.rng),
        )

    def analyze_extended(self, data: ApartmentData) -> ExtendedAnalysisResult:
        """Deterministic weighted score with per-factor reasons and market insights."""
        b = self.score_breakdown(data)

        subscores = {
            "price_comparison": b["price_score"],
            "location": b["location"],
            "building_quality": b["building_quality"],
            "size_efficiency": b["size_efficiency"],
            "amenities": b["amenities"],
        }
        raw = NEUTRAL_SCORE
        for factor, weight in EXTENDED_WEIGHTS.items():
            raw += (subscores[factor] - NEUTRAL_SCORE) * weight
        raw += b["growth"]

        score = self._finalize(raw, b["price_ratio"])
        label = label_for(score)

        positive, negative = matched_amenities(data.description)
        expected = b["expected_price_per_sqm"]

        factors = Factors(
            price_comparison=PriceFactor(
                score=b["price_score"],
                reason=explanations.price_reason(b["price_per_sqm"], expected, b["price_ratio"]),
                comparison=compare_platforms(expected, b["price_per_sqm"], rng=self.rng),
            ),
            location=FactorScore(
                score=round(b["location"], 1),
                reason=explanations.location_reason(data.city, data.district, b["location"]),
            ),
            building_quality=FactorScore(
                score=round(b["building_quality"], 1),
                reason=explanations.building_reason(data, self.current_year - data.year_built),
            ),
            amenities=FactorScore(
                score=round(b["amenities"], 1),
                reason=explanations.amenities_reason(positive, negative),
            ),
            size_efficiency=FactorScore(
                score=b["size_efficiency"],
                reason=explanations.size_reason(data.size, data.rooms),
            ),
        )

        logger.info(
            f"Analyzed {data.property_type} in {data.city} (extended): "
            f"ratio={b['price_ratio']:.2f} score={score} label={label}"
        )

        return ExtendedAnalysisResult(
            score=score,
            label=label,
            explanation=explanations.summary(label, score, data.city),
            factors=factors,
            market_insights=market_insights(data.city, expected),
        )
