import asyncio

import httpx

from horecascan.schemas.buurt import PlaceCategory
from horecascan.services.overpass import (
    analyze_location,
    build_query,
    element_to_place,
    fetch_nearby_places,
)

LAT, LNG = 52.3731, 4.8926

ELEMENTS = {
    "elements": [
        {"type": "node", "lat": 52.3735, "lon": 4.8930, "tags": {"amenity": "cafe", "name": "De Koffie"}},
        {"type": "node", "lat": 52.3740, "lon": 4.8920, "tags": {"amenity": "restaurant"}},
        {"type": "way", "center": {"lat": 52.3720, "lon": 4.8940}, "tags": {"office": "company"}},
        {"type": "node", "lat": 52.3791, "lon": 4.9003, "tags": {"railway": "station", "name": "Centraal"}},
    ]
}


def run_fetch(handler, **kwargs):
    async def _go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_nearby_places(LAT, LNG, 500, client=client, **kwargs)

    return asyncio.run(_go())


def test_query_covers_radius_and_station_radius():
    query = build_query(LAT, LNG, 500)
    assert f"(around:500,{LAT},{LNG})" in query
    assert f'node["railway"="station"](around:1000,{LAT},{LNG})' in query
    assert 'way["office"]' in query
    assert "[out:json]" in query


def test_element_to_place_uses_tags():
    place = element_to_place(ELEMENTS["elements"][0], LAT, LNG)
    assert place.name == "De Koffie"
    assert place.type == "cafe"
    assert place.category == PlaceCategory.HORECA_COMPLEMENTAIR
    assert place.distance == int(place.distance)
    assert 0 < place.distance < 100


def test_element_without_name_gets_label():
    place = element_to_place(ELEMENTS["elements"][1], LAT, LNG)
    assert place.name == "Restaurant"


def test_way_uses_center():
    place = element_to_place(ELEMENTS["elements"][2], LAT, LNG)
    assert place.lat == 52.3720
    assert place.category == PlaceCategory.KANTOOR


def test_element_without_position_sits_on_origin():
    place = element_to_place({"tags": {"shop": "mall"}}, LAT, LNG)
    assert place.distance == 0
    assert place.name == "Winkelcentrum"


def test_fetch_parses_elements():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.content
        return httpx.Response(200, json=ELEMENTS)

    places = run_fetch(handler)

    assert seen["method"] == "POST"
    assert seen["body"].startswith(b"data=")
    assert [p.category for p in places] == [
        PlaceCategory.HORECA_COMPLEMENTAIR,
        PlaceCategory.HORECA_CONCURRENT,
        PlaceCategory.KANTOOR,
        PlaceCategory.TRANSPORT,
    ]
    assert places[3].type == "station"


def test_malformed_elements_are_skipped():
    payload = {"elements": ["garbage", {"tags": ["not", "a", "dict"]}, ELEMENTS["elements"][0]]}
    places = run_fetch(lambda request: httpx.Response(200, json=payload))
    assert [p.name for p in places] == ["De Koffie"]


def test_non_list_elements_return_empty():
    assert run_fetch(lambda request: httpx.Response(200, json={"elements": 5})) == []
    assert run_fetch(lambda request: httpx.Response(200, json={"elements": True})) == []
    assert run_fetch(lambda request: httpx.Response(200, json={"elements": {"lat": 52.0}})) == []


def test_out_of_range_coordinates_are_skipped():
    huge = {"type": "node", "lat": 10**400, "lon": 4.89, "tags": {"amenity": "bar"}}
    payload = {"elements": [huge, ELEMENTS["elements"][0]]}
    places = run_fetch(lambda request: httpx.Response(200, json=payload))
    assert [p.name for p in places] == ["De Koffie"]


def test_analyze_location_survives_malformed_payload():
    async def _go():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"elements": 5}))
        async with httpx.AsyncClient(transport=transport) as client:
            return await analyze_location(LAT, LNG, 500, client=client)

    analysis = asyncio.run(_go())
    assert analysis.buzz_index == 3
    assert analysis.concurrenten == []


def test_server_error_returns_empty():
    assert run_fetch(lambda request: httpx.Response(504, text="Gateway Timeout")) == []


def test_invalid_json_returns_empty():
    assert run_fetch(lambda request: httpx.Response(200, content=b"<html>rate limited</html>")) == []


def test_unexpected_payload_returns_empty():
    assert run_fetch(lambda request: httpx.Response(200, json=["no", "elements"])) == []


def test_timeout_returns_empty():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    assert run_fetch(handler) == []


def test_connection_error_returns_empty():
    def handler(request):
        raise httpx.ConnectError("no route", request=request)

    assert run_fetch(handler) == []


def test_analyze_location_degrades_to_empty_buurt():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    async def _go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await analyze_location(LAT, LNG, 500, client=client)

    analysis = asyncio.run(_go())
    assert analysis.buzz_index == 3
    assert analysis.stats.concurrent_radius == 500


def test_analyze_location_end_to_end():
    async def _go():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=ELEMENTS))
        async with httpx.AsyncClient(transport=transport) as client:
            return await analyze_location(LAT, LNG, 500, client=client)

    analysis = asyncio.run(_go())
    assert analysis.stats.horeca_count == 2
    assert analysis.stats.kantoren_nabij == 1
    assert len(analysis.transport) == 1
