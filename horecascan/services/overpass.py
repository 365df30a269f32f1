# horecascan/services/overpass.py
import httpx
from typing import Any, Dict, List, Optional
from loguru import logger

from horecascan.core.config import settings
from horecascan.schemas.buurt import BuurtAnalysis, NearbyPlace
from horecascan.services.buurt import analyze_buurt
from horecascan.services.categorizer import categorize, place_type
from horecascan.services.features import round_half_up
from horecascan.services.geo import haversine_distance


def build_query(lat: float, lng: float, radius_m: int) -> str:
    """Overpass QL for horeca, transport, offices, shops, education and culture."""
    around = f"(around:{radius_m},{lat},{lng})"
    stations = f"(around:{radius_m * 2},{lat},{lng})"
    return f"""
    [out:json][timeout:{settings.OVERPASS_QUERY_TIMEOUT_S}];
    (
      node["amenity"~"restaurant|cafe|bar|pub|fast_food|ice_cream|biergarten|food_court"]{around};
      node["public_transport"="stop_position"]{around};
      node["amenity"="parking"]{around};
      node["railway"="station"]{stations};
      node["office"]{around};
      way["office"]{around};
      node["shop"~"supermarket|convenience|mall"]{around};
      node["amenity"~"university|school|college"]{around};
      node["amenity"~"theatre|cinema|museum"]{around};
    );
    out body;
    """


def element_to_place(el: Dict[str, Any], lat: float, lng: float) -> NearbyPlace:
    """
    Overpass element -> NearbyPlace.
    Ways carry their position in `center`; without any position the query origin is used.
    """
    tags = el.get("tags") or {}
    center = el.get("center") or {}
    el_lat = float(el.get("lat") or center.get("lat") or lat)
    el_lng = float(el.get("lon") or center.get("lon") or lng)
    label = categorize(tags)

    return NearbyPlace(
        name=tags.get("name") or label.label,
        type=place_type(tags),
        category=label.category,
        distance=round_half_up(haversine_distance(lat, lng, el_lat, el_lng)),
        lat=el_lat,
        lng=el_lng,
    )


def _parse_elements(data: Any, lat: float, lng: float) -> List[NearbyPlace]:
    places: List[NearbyPlace] = []
    elements = data.get("elements") if isinstance(data, dict) else None
    if not isinstance(elements, list):
        logger.error(f"[Overpass] unexpected payload, no element list: {type(elements).__name__}")
        return places
    for el in elements:
        try:
            places.append(element_to_place(el, lat, lng))
        except (AttributeError, TypeError, ValueError, ArithmeticError) as e:
            logger.debug(f"[Overpass] skipping malformed element: {e}")
            continue
    return places


async def fetch_nearby_places(
    lat: float,
    lng: float,
    radius_m: Optional[int] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> List[NearbyPlace]:
    """
    Query the Overpass API for places around (lat, lng).
    Any failure (timeout, HTTP error, bad JSON) returns [] so analysis can continue.
    """
    radius_m = radius_m or settings.DEFAULT_RADIUS_M
    query = build_query(lat, lng, radius_m)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.OVERPASS_TIMEOUT_S) as own:
                r = await own.post(settings.OVERPASS_API_URL, data={"data": query})
        else:
            r = await client.post(
                settings.OVERPASS_API_URL,
                data={"data": query},
                timeout=settings.OVERPASS_TIMEOUT_S,
            )
        r.raise_for_status()
        data = r.json()
    except httpx.TimeoutException as e:
        logger.warning(f"[Overpass] timeout after {settings.OVERPASS_TIMEOUT_S}s: {e}")
        return []
    except httpx.HTTPError as e:
        logger.error(f"[Overpass] HTTPError: {e}")
        return []
    except ValueError as e:
        logger.error(f"[Overpass] invalid JSON: {e}")
        return []
    except Exception as e:
        logger.error(f"[Overpass] other error: {e}")
        return []

    places = _parse_elements(data, lat, lng)
    logger.info(f"[Overpass] {len(places)} places within {radius_m}m of ({lat}, {lng})")
    return places


async def analyze_location(
    lat: float,
    lng: float,
    radius_m: Optional[int] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> BuurtAnalysis:
    """Fetch + analyze in one call. An unreachable POI source yields the empty-buurt analysis."""
    radius_m = radius_m or settings.DEFAULT_RADIUS_M
    places = await fetch_nearby_places(lat, lng, radius_m, client=client)
    return analyze_buurt(places, radius_m)
