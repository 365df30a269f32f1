# horecascan/services/categorizer.py
# -----------------------------------------------------------------------------
# OSM tag bag -> (PlaceCategory, display label)
# - ordered rule list, first match wins
# - every rule is a plain function so it can be tested on its own
# -----------------------------------------------------------------------------
from typing import Callable, Mapping, Optional, Tuple

from horecascan.schemas.buurt import PlaceCategory, PlaceLabel

Tags = Mapping[str, str]
Rule = Callable[[Tags], Optional[PlaceLabel]]

DEFAULT_LABEL = PlaceLabel(category=PlaceCategory.WINKEL, label="Voorziening")

CULTURE_LABELS = {"cinema": "Bioscoop", "museum": "Museum", "theatre": "Theater"}


def _horeca_concurrent(tags: Tags) -> Optional[PlaceLabel]:
    amenity = tags.get("amenity") or ""
    if amenity in ("restaurant", "fast_food", "food_court"):
        return PlaceLabel(category=PlaceCategory.HORECA_CONCURRENT, label="Restaurant")
    if amenity in ("bar", "pub", "biergarten"):
        return PlaceLabel(category=PlaceCategory.HORECA_CONCURRENT, label="Bar")
    return None


def _horeca_complementair(tags: Tags) -> Optional[PlaceLabel]:
    if (tags.get("amenity") or "") in ("cafe", "ice_cream"):
        return PlaceLabel(category=PlaceCategory.HORECA_COMPLEMENTAIR, label="Café")
    return None


def _transport(tags: Tags) -> Optional[PlaceLabel]:
    is_station = tags.get("railway") == "station"
    if tags.get("public_transport") or is_station:
        label = "Station" if is_station else "OV-halte"
        return PlaceLabel(category=PlaceCategory.TRANSPORT, label=label)
    if tags.get("amenity") == "parking":
        return PlaceLabel(category=PlaceCategory.TRANSPORT, label="Parkeren")
    return None


def _kantoor(tags: Tags) -> Optional[PlaceLabel]:
    if tags.get("office"):
        return PlaceLabel(category=PlaceCategory.KANTOOR, label="Kantoor")
    return None


def _shops(tags: Tags) -> Optional[PlaceLabel]:
    shop = tags.get("shop") or ""
    if shop in ("supermarket", "convenience"):
        return PlaceLabel(category=PlaceCategory.SUPERMARKT, label="Supermarkt")
    if shop == "mall":
        return PlaceLabel(category=PlaceCategory.WINKEL, label="Winkelcentrum")
    return None


def _onderwijs(tags: Tags) -> Optional[PlaceLabel]:
    if (tags.get("amenity") or "") in ("university", "school", "college"):
        return PlaceLabel(category=PlaceCategory.ONDERWIJS, label="Onderwijs")
    return None


def _cultuur(tags: Tags) -> Optional[PlaceLabel]:
    label = CULTURE_LABELS.get(tags.get("amenity") or "")
    if label:
        return PlaceLabel(category=PlaceCategory.CULTUUR, label=label)
    return None


# evaluation order is part of the contract
RULES: Tuple[Rule, ...] = (
    _horeca_concurrent,
    _horeca_complementair,
    _transport,
    _kantoor,
    _shops,
    _onderwijs,
    _cultuur,
)


def categorize(tags: Optional[Tags]) -> PlaceLabel:
    """Classify an OSM tag bag. Missing or empty tags fall through to the default."""
    if not tags:
        return DEFAULT_LABEL
    for rule in RULES:
        result = rule(tags)
        if result is not None:
            return result
    return DEFAULT_LABEL


def place_type(tags: Optional[Tags]) -> str:
    """Raw type string kept on NearbyPlace (e.g. 'cafe', 'station')."""
    tags = tags or {}
    for key in ("amenity", "shop", "office", "railway", "public_transport"):
        if tags.get(key):
            return tags[key]
    return "unknown"
