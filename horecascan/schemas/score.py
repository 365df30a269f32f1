# horecascan/schemas/score.py
# -----------------------------------------------------------------------------
# Horeca score input bundles and result models
# - every sub-bundle and every attribute is optional
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from horecascan.schemas.base import CamelModel

ScoreGrade = Literal["A+", "A", "B+", "B", "C+", "C", "D", "F"]
ScoreFactorKey = Literal["location", "licenses", "facilities", "condition", "price_quality"]
KitchenType = Literal["none", "basic", "standard", "professional", "industrial"]
ExtractionType = Literal["none", "basic", "standard", "professional"]
EnergyLabel = Literal["A", "B", "C", "D", "E", "F", "G"]
Priority = Literal["high", "medium", "low"]


class _Bundle(CamelModel):
    # input bundles tolerate unknown keys
    model_config = ConfigDict(extra="ignore")


class LocationData(_Bundle):
    footfall_estimate: Optional[float] = None  # people per day
    neighborhood_rating: Optional[float] = None  # 1-10
    public_transport_distance: Optional[float] = None  # meters
    parking_distance: Optional[float] = None  # meters
    tourist_area: Optional[bool] = None
    high_visibility: Optional[bool] = None


class LicenseData(_Bundle):
    alcohol_license: Optional[bool] = None  # drank vergunning
    terrace_license: Optional[bool] = None  # terrasvergunning
    late_night_license: Optional[bool] = None  # nachtvergunning
    food_service_license: Optional[bool] = None  # exploitatievergunning
    gaming_license: Optional[bool] = None  # speelautomatenvergunning
    catering_license: Optional[bool] = None
    event_license: Optional[bool] = None


class FacilitiesData(_Bundle):
    kitchen_type: Optional[KitchenType] = None
    extraction_type: Optional[ExtractionType] = None
    cold_storage: Optional[bool] = None
    cellar: Optional[bool] = None
    seating_capacity_inside: Optional[int] = None
    seating_capacity_terrace: Optional[int] = None
    accessible_toilets: Optional[bool] = None
    staff_area: Optional[bool] = None
    storage_space: Optional[bool] = None
    square_meters: Optional[float] = None


class ConditionData(_Bundle):
    build_year: Optional[int] = None
    last_renovation_year: Optional[int] = None
    overall_condition_rating: Optional[float] = None  # 1-10
    electrical_rating: Optional[float] = None
    plumbing_rating: Optional[float] = None
    hvac_rating: Optional[float] = None
    recently_renovated: Optional[bool] = None  # within 5 years
    energy_label: Optional[EnergyLabel] = None


class PriceQualityData(_Bundle):
    monthly_rent: Optional[float] = None  # EUR
    key_money: Optional[float] = None  # overname / goodwill, EUR
    revenue_potential: Optional[float] = None  # expected monthly revenue
    price_per_sqm: Optional[float] = None
    market_average_price_per_sqm: Optional[float] = None
    lease_duration_years: Optional[float] = None
    below_market_rent: Optional[bool] = None


class HorecaProperty(_Bundle):
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


class HorecaFeatures(_Bundle):
    location: Optional[LocationData] = None
    licenses: Optional[LicenseData] = None
    facilities: Optional[FacilitiesData] = None
    condition: Optional[ConditionData] = None
    price_quality: Optional[PriceQualityData] = None


class ScoreFactorResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int  # 0-100
    weight: float  # 0-1, all weights sum to 1
    weighted_score: float
    grade: ScoreGrade
    details: List[str]


class ScoreSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    factor: ScoreFactorKey
    priority: Priority
    suggestion: str
    potential_impact: int


class HorecaScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: ScoreGrade
    numeric_score: int
    breakdown: Dict[ScoreFactorKey, ScoreFactorResult]
    suggestions: List[ScoreSuggestion]
    calculated_at: datetime


class ScoreColorScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    bg: str
    text: str
    border: str
