import pytest

from horecascan.schemas.buurt import NearbyPlace, PlaceCategory


@pytest.fixture
def make_place():
    def _make(category: PlaceCategory, type: str = "unknown", distance: float = 100, name: str = "Plek"):
        return NearbyPlace(
            name=name,
            type=type,
            category=category,
            distance=distance,
            lat=52.37,
            lng=4.89,
        )

    return _make


@pytest.fixture
def lively_places(make_place):
    """14 horeca, 2 stations + 3 nearby stops, 5 amenities, 7 offices."""
    places = [make_place(PlaceCategory.HORECA_CONCURRENT, "restaurant") for _ in range(12)]
    places += [make_place(PlaceCategory.HORECA_COMPLEMENTAIR, "cafe") for _ in range(2)]
    places += [make_place(PlaceCategory.TRANSPORT, "station", distance=400) for _ in range(2)]
    places += [make_place(PlaceCategory.TRANSPORT, "stop_position", distance=100) for _ in range(3)]
    places += [make_place(PlaceCategory.SUPERMARKT, "supermarket") for _ in range(4)]
    places += [make_place(PlaceCategory.ONDERWIJS, "school")]
    places += [make_place(PlaceCategory.KANTOOR, "company") for _ in range(7)]
    return places
