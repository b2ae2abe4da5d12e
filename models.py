from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

PropertyType = Literal["rent", "sale"]
BuildingType = Literal["apartment", "house", "studio", "penthouse"]
Condition = Literal["new", "renovated", "good", "needs_renovation"]
Label = Literal["Underpriced", "Fair", "Overpriced"]
PricePosition = Literal["lower", "average", "higher"]


class WireModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


# ==================== INPUT ====================

class ApartmentData(WireModel):
    # NaN and Infinity slip past "> 0" checks
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    property_type: PropertyType = Field(alias="propertyType")
    price: float
    size: float
    city: str
    district: str
    exact_location: str = Field(alias="exactLocation")
    rooms: int
    floor: int
    total_floors: int = Field(alias="totalFloors")
    building_type: BuildingType = Field(alias="buildingType")
    condition: Condition
    year_built: int = Field(alias="yearBuilt")
    description: str


# ==================== OUTPUT ====================

class AnalysisResult(WireModel):
    score: float
    label: Label
    explanation: str


class PlatformComparison(WireModel):
    platform: str
    average_price: float = Field(alias="averagePrice")
    listings_count: int = Field(alias="listingsCount")
    price_position: PricePosition = Field(alias="pricePosition")
    # generated figures, not sourced from the named platform
    synthetic: bool = True


class FactorScore(WireModel):
    score: float
    reason: str


class PriceFactor(FactorScore):
    comparison: List[PlatformComparison] = []


class Factors(WireModel):
    price_comparison: PriceFactor = Field(alias="priceComparison")
    location: FactorScore
    building_quality: FactorScore = Field(alias="buildingQuality")
    amenities: FactorScore
    size_efficiency: FactorScore = Field(alias="sizeEfficiency")


class PriceRange(WireModel):
    min: float
    max: float


class MarketInsights(WireModel):
    average_price: float = Field(alias="averagePrice")
    price_range: PriceRange = Field(alias="priceRange")
    market_trend: str = Field(alias="marketTrend")
    competition: str


class ExtendedAnalysisResult(AnalysisResult):
    factors: Factors
    market_insights: MarketInsights = Field(alias="marketInsights")


class SavedProperty(ApartmentData):
    id: str
    analysis: dict
    timestamp: int
