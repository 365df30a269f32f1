# horecascan/services/horeca_score.py
# -----------------------------------------------------------------------------
# Horeca score calculator
# - five weighted factors: location, licenses, facilities, condition, price/quality
# - each factor averages the sub-scores of the attributes that are present
# - no attributes for a factor -> neutral 50
# -----------------------------------------------------------------------------
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from loguru import logger

from horecascan.schemas.score import (
    ConditionData,
    FacilitiesData,
    HorecaFeatures,
    HorecaProperty,
    HorecaScoreResult,
    LicenseData,
    LocationData,
    PriceQualityData,
    ScoreFactorResult,
    ScoreGrade,
    ScoreSuggestion,
)
from horecascan.services.features import clamp, normalize_rating, round_half_up

NEUTRAL_SCORE = 50

FACTOR_WEIGHTS: Dict[str, float] = {
    "location": 0.30,
    "licenses": 0.20,
    "facilities": 0.20,
    "condition": 0.15,
    "price_quality": 0.15,
}

GRADE_THRESHOLDS: List[Tuple[int, ScoreGrade]] = [
    (95, "A+"),
    (85, "A"),
    (75, "B+"),
    (65, "B"),
    (55, "C+"),
    (45, "C"),
    (30, "D"),
    (0, "F"),
]

# license -> points, sums to 100
LICENSE_POINTS: List[Tuple[str, str, int]] = [
    ("alcohol_license", "Alcohol license", 25),
    ("food_service_license", "Food service license", 25),
    ("terrace_license", "Terrace permit", 15),
    ("late_night_license", "Late night permit", 15),
    ("event_license", "Event/music permit", 10),
    ("gaming_license", "Gaming permit", 5),
    ("catering_license", "Catering permit", 5),
]

KITCHEN_SCORES = {"none": 0, "basic": 40, "standard": 65, "professional": 85, "industrial": 100}
EXTRACTION_SCORES = {"none": 0, "basic": 40, "standard": 70, "professional": 100}
ENERGY_SCORES = {"A": 100, "B": 85, "C": 70, "D": 55, "E": 40, "F": 25, "G": 10}

# (attribute, label, score when present); absent facility scores 20
FACILITY_FLAGS: List[Tuple[str, str, int]] = [
    ("cold_storage", "Cold storage", 80),
    ("cellar", "Cellar", 75),
    ("accessible_toilets", "Accessible toilets", 85),
    ("staff_area", "Staff area", 70),
    ("storage_space", "Storage space", 75),
]
MISSING_FACILITY_SCORE = 20

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def score_to_grade(score: float) -> ScoreGrade:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return "F"


def _factor(key: str, total: float, count: int, details: List[str], empty: str) -> ScoreFactorResult:
    score = round_half_up(total / count) if count > 0 else NEUTRAL_SCORE
    weight = FACTOR_WEIGHTS[key]
    return ScoreFactorResult(
        score=score,
        weight=weight,
        weighted_score=round(score * weight, 2),
        grade=score_to_grade(score),
        details=details or [empty],
    )


def _band(value: float, bands: List[Tuple[float, int]], floor: int) -> int:
    """First band whose lower bound `value` reaches; otherwise `floor`."""
    for minimum, points in bands:
        if value >= minimum:
            return points
    return floor


# ── location ──────────────────────────────────────────────────────────────────
def calculate_location_score(data: Optional[LocationData]) -> ScoreFactorResult:
    data = data or LocationData()
    details: List[str] = []
    total, count = 0.0, 0

    if data.footfall_estimate is not None:
        footfall = clamp(data.footfall_estimate / 5000 * 100, 0, 100)
        total += footfall
        count += 1
        if footfall >= 80:
            details.append(f"Excellent foot traffic: {data.footfall_estimate:g}/day")
        elif footfall >= 50:
            details.append(f"Moderate foot traffic: {data.footfall_estimate:g}/day")
        else:
            details.append(f"Low foot traffic: {data.footfall_estimate:g}/day")

    if data.neighborhood_rating is not None:
        total += normalize_rating(data.neighborhood_rating)
        count += 1
        details.append(f"Neighborhood rating: {data.neighborhood_rating:g}/10")

    if data.public_transport_distance is not None:
        # closer is better, 1000m and beyond scores 0
        transport = clamp(100 - data.public_transport_distance / 1000 * 100, 0, 100)
        total += transport
        count += 1
        if transport >= 80:
            details.append(f"Excellent public transport access: {data.public_transport_distance:g}m")

    if data.parking_distance is not None:
        parking = clamp(100 - data.parking_distance / 500 * 100, 0, 100)
        total += parking
        count += 1
        if parking >= 80:
            details.append(f"Good parking nearby: {data.parking_distance:g}m")

    if data.tourist_area is not None:
        total += 90 if data.tourist_area else 40
        count += 1
        if data.tourist_area:
            details.append("Located in tourist area")

    if data.high_visibility is not None:
        total += 85 if data.high_visibility else 35
        count += 1
        if data.high_visibility:
            details.append("High visibility location")

    return _factor("location", total, count, details, "No location data provided")


# ── licenses ──────────────────────────────────────────────────────────────────
def calculate_license_score(data: Optional[LicenseData]) -> ScoreFactorResult:
    """
    Sum of the points of the licenses held.

    An absent license bundle is unknown and scores the neutral 50. Once the bundle
    is present, an omitted flag counts as "not held". Callers rely on this asymmetry.
    """
    if data is None:
        return _factor("licenses", 0, 0, [], "No license data provided")

    present: List[str] = []
    missing: List[str] = []
    score = 0
    for attr, label, points in LICENSE_POINTS:
        if getattr(data, attr):
            score += points
            present.append(label)
        else:
            missing.append(label)

    details: List[str] = []
    if present:
        details.append(f"Present: {', '.join(present)}")
    if 0 < len(missing) <= 3:
        details.append(f"Missing: {', '.join(missing)}")

    return _factor("licenses", score, 1, details, "No licenses present")


# ── facilities ────────────────────────────────────────────────────────────────
def calculate_facilities_score(data: Optional[FacilitiesData]) -> ScoreFactorResult:
    data = data or FacilitiesData()
    details: List[str] = []
    total, count = 0.0, 0

    if data.kitchen_type is not None:
        kitchen = KITCHEN_SCORES[data.kitchen_type]
        total += kitchen
        count += 1
        if kitchen >= 65:
            details.append(f"{data.kitchen_type} kitchen")

    if data.extraction_type is not None:
        extraction = EXTRACTION_SCORES[data.extraction_type]
        total += extraction
        count += 1
        if extraction >= 70:
            details.append(f"{data.extraction_type} extraction system")

    for attr, label, points in FACILITY_FLAGS:
        value = getattr(data, attr)
        if value is True:
            total += points
            count += 1
            details.append(label)
        elif value is False:
            total += MISSING_FACILITY_SCORE
            count += 1

    inside = data.seating_capacity_inside or 0
    terrace = data.seating_capacity_terrace or 0
    seats = inside + terrace
    if seats > 0:
        total += clamp(seats / 200 * 100, 0, 100)
        count += 1
        details.append(f"Total seating: {seats} (inside: {inside}, terrace: {terrace})")

    if data.square_meters is not None and data.square_meters > 0:
        size = clamp(data.square_meters / 500 * 100, 0, 100)
        total += size
        count += 1
        if size >= 50:
            details.append(f"Floor space: {data.square_meters:g} m²")

    return _factor("facilities", total, count, details, "No facilities data provided")


# ── condition ─────────────────────────────────────────────────────────────────
def _age_score(age: int) -> int:
    if age > 100:
        return 30
    if age > 50:
        return 50
    if age > 25:
        return 70
    if age > 10:
        return 85
    return 100


def _renovation_score(years: int) -> int:
    if years > 20:
        return 30
    if years > 10:
        return 55
    if years > 5:
        return 75
    if years > 2:
        return 90
    return 100


def calculate_condition_score(data: Optional[ConditionData], current_year: int) -> ScoreFactorResult:
    data = data or ConditionData()
    details: List[str] = []
    total, count = 0.0, 0

    if data.build_year is not None:
        age = current_year - data.build_year
        total += _age_score(age)
        count += 1
        details.append(f"Built in {data.build_year} ({age} years old)")

    if data.last_renovation_year is not None:
        years = current_year - data.last_renovation_year
        total += _renovation_score(years)
        count += 1
        details.append(f"Last renovated: {data.last_renovation_year} ({years} years ago)")
    elif data.recently_renovated:
        total += 90
        count += 1
        details.append("Recently renovated")

    ratings = [
        ("Overall condition", data.overall_condition_rating),
        ("Electrical", data.electrical_rating),
        ("Plumbing", data.plumbing_rating),
        ("HVAC", data.hvac_rating),
    ]
    for name, value in ratings:
        if value is None:
            continue
        rating = normalize_rating(value)
        total += rating
        count += 1
        if rating >= 70:
            details.append(f"{name}: {value:g}/10")

    if data.energy_label is not None:
        total += ENERGY_SCORES.get(data.energy_label, NEUTRAL_SCORE)
        count += 1
        details.append(f"Energy label: {data.energy_label}")

    return _factor("condition", total, count, details, "No condition data provided")


# ── price / quality ───────────────────────────────────────────────────────────
def calculate_price_quality_score(data: Optional[PriceQualityData]) -> ScoreFactorResult:
    data = data or PriceQualityData()
    details: List[str] = []
    total, count = 0.0, 0

    if data.price_per_sqm is not None and data.market_average_price_per_sqm:
        ratio = data.price_per_sqm / data.market_average_price_per_sqm
        # lower than market is better
        if ratio <= 0.7:
            price = 100
        elif ratio <= 0.85:
            price = 85
        elif ratio <= 1.0:
            price = 70
        elif ratio <= 1.15:
            price = 55
        elif ratio <= 1.3:
            price = 40
        else:
            price = 25
        total += price
        count += 1
        if ratio < 1.0:
            details.append(
                f"{round_half_up((1 - ratio) * 100)}% below market rate (€{data.price_per_sqm:g}/m²)"
            )
        elif ratio > 1.0:
            details.append(
                f"{round_half_up((ratio - 1) * 100)}% above market rate (€{data.price_per_sqm:g}/m²)"
            )
        else:
            details.append(f"At market rate (€{data.price_per_sqm:g}/m²)")

    rent = data.monthly_rent
    if rent and rent > 0 and data.revenue_potential is not None:
        revenue_ratio = data.revenue_potential / rent
        total += _band(revenue_ratio, [(15, 100), (10, 85), (7, 70), (5, 55), (3, 40)], 25)
        count += 1
        details.append(
            f"Revenue/rent ratio: {revenue_ratio:.1f}x "
            f"(€{data.revenue_potential:g} potential vs €{rent:g} rent)"
        )

    if rent and rent > 0 and data.key_money is not None:
        months = data.key_money / rent
        # lower is better, ideally under a year of rent
        if months <= 6:
            key_money = 100
        elif months <= 12:
            key_money = 80
        elif months <= 24:
            key_money = 60
        elif months <= 36:
            key_money = 40
        else:
            key_money = 20
        total += key_money
        count += 1
        details.append(f"Key money: €{data.key_money:g} ({months:.1f} months rent)")

    if data.lease_duration_years is not None:
        total += _band(data.lease_duration_years, [(10, 100), (7, 85), (5, 70), (3, 55)], 35)
        count += 1
        details.append(f"Lease duration: {data.lease_duration_years:g} years")

    if data.below_market_rent is not None:
        total += 90 if data.below_market_rent else 40
        count += 1
        if data.below_market_rent:
            details.append("Below market rent")

    return _factor("price_quality", total, count, details, "No price/quality data provided")


# ── suggestions ───────────────────────────────────────────────────────────────
def generate_suggestions(
    breakdown: Dict[str, ScoreFactorResult],
    features: HorecaFeatures,
    current_year: int,
) -> List[ScoreSuggestion]:
    """
    Improvement hints per weak factor.
    Ordered high -> medium -> low; within a priority the rule order below is kept.
    """
    out: List[ScoreSuggestion] = []

    def add(factor: str, priority: str, text: str, impact: int) -> None:
        out.append(
            ScoreSuggestion(factor=factor, priority=priority, suggestion=text, potential_impact=impact)
        )

    location = features.location or LocationData()
    licenses = features.licenses or LicenseData()
    facilities = features.facilities or FacilitiesData()
    condition = features.condition or ConditionData()
    price = features.price_quality or PriceQualityData()

    if breakdown["location"].score < 60 and not location.high_visibility:
        add(
            "location",
            "medium",
            "Consider properties with higher street visibility to increase foot traffic",
            10,
        )

    if breakdown["licenses"].score < 70:
        if not licenses.alcohol_license:
            add(
                "licenses",
                "high",
                "Obtain alcohol license (drank vergunning) - essential for most horeca businesses",
                25,
            )
        if not licenses.terrace_license:
            add("licenses", "medium", "Apply for terrace permit to increase seating capacity and revenue", 15)
        if not licenses.late_night_license:
            add("licenses", "low", "Consider late night permit for extended operating hours", 10)

    if breakdown["facilities"].score < 70:
        if facilities.kitchen_type in ("none", "basic"):
            add("facilities", "high", "Upgrade kitchen to professional standard for expanded menu options", 20)
        if facilities.extraction_type in ("none", "basic"):
            add(
                "facilities",
                "high",
                "Install professional extraction system - required for most cooking operations",
                15,
            )
        if not facilities.cold_storage:
            add("facilities", "medium", "Add cold storage facilities for food safety compliance", 10)

    if breakdown["condition"].score < 60:
        renovated = condition.last_renovation_year
        if renovated is None or current_year - renovated > 10:
            add(
                "condition",
                "medium",
                "Consider renovation to improve property condition and energy efficiency",
                15,
            )
        if condition.energy_label in ("E", "F", "G"):
            add(
                "condition",
                "medium",
                "Improve energy efficiency to reduce operating costs and improve energy label",
                10,
            )

    if breakdown["price_quality"].score < 60:
        if (
            price.price_per_sqm
            and price.market_average_price_per_sqm
            and price.price_per_sqm > price.market_average_price_per_sqm
        ):
            add("price_quality", "high", "Negotiate rent - current price is above market average", 15)
        if price.lease_duration_years and price.lease_duration_years < 5:
            add(
                "price_quality",
                "medium",
                "Negotiate longer lease term for business stability (minimum 5 years recommended)",
                10,
            )

    # sorted() is stable
    return sorted(out, key=lambda s: PRIORITY_ORDER[s.priority])


# ── main ──────────────────────────────────────────────────────────────────────
def calculate_horeca_score(
    horeca_property: Optional[HorecaProperty],
    features: Optional[HorecaFeatures],
    calculated_at: Optional[datetime] = None,
) -> HorecaScoreResult:
    """
    Score a horeca property on five weighted factors.

    Args:
        horeca_property: identity of the property; carried for logging only.
        features: optional location/licenses/facilities/condition/price_quality bundles.
        calculated_at: timestamp for the result and reference year for building age.
            Defaults to now; pass a fixed value for reproducible results.

    Returns:
        HorecaScoreResult with overall grade, numeric score 0-100, per-factor
        breakdown and prioritized suggestions.
    """
    features = features or HorecaFeatures()
    calculated_at = calculated_at or datetime.now()
    year = calculated_at.year

    breakdown: Dict[str, ScoreFactorResult] = {
        "location": calculate_location_score(features.location),
        "licenses": calculate_license_score(features.licenses),
        "facilities": calculate_facilities_score(features.facilities),
        "condition": calculate_condition_score(features.condition, year),
        "price_quality": calculate_price_quality_score(features.price_quality),
    }

    weighted = sum(f.score * f.weight for f in breakdown.values())
    numeric = int(clamp(round_half_up(weighted), 0, 100))

    result = HorecaScoreResult(
        overall_score=score_to_grade(numeric),
        numeric_score=numeric,
        breakdown=breakdown,
        suggestions=generate_suggestions(breakdown, features, year),
        calculated_at=calculated_at,
    )
    name = horeca_property.name if horeca_property and horeca_property.name else "property"
    logger.debug(f"[score] {name}: {numeric} ({result.overall_score})")
    return result
