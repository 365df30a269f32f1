import itertools

from horecascan.schemas.buurt import PlaceCategory
from horecascan.services.buurt import (
    analyze_buurt,
    buzz_index,
    horeca_density,
    transport_score,
    voorzieningen_score,
)


def test_empty_neighborhood_bottoms_out():
    result = analyze_buurt([], 500)

    assert result.buzz_index == 3
    assert result.stats.horeca_count == 0
    assert result.stats.horeca_density == "laag"
    assert result.stats.transport_score == 0
    assert result.stats.voorzieningen_score == 0
    assert result.stats.kantoren_nabij == 0
    assert result.concurrenten == []
    assert result.summary.startswith("Een rustige locatie")
    assert "Slechts 0 concurrenten" in result.summary


def test_lively_neighborhood(lively_places):
    result = analyze_buurt(lively_places, 500)

    assert len(result.concurrenten) == 12
    assert len(result.complementair) == 2
    assert len(result.transport) == 5
    assert len(result.voorzieningen) == 5
    assert result.stats.horeca_count == 14
    assert result.stats.horeca_density == "gemiddeld"
    assert result.stats.transport_score == 10  # 3 near stops * 2 + 2 stations * 3, capped
    assert result.stats.voorzieningen_score == 8
    assert result.stats.kantoren_nabij == 7
    assert result.buzz_index == 9

    assert result.summary.startswith("Dit is een levendige locatie")
    assert "Met 12 horecazaken binnen 500m" in result.summary
    assert "Treinstations binnen loopafstand" in result.summary
    assert "7 kantoren in de buurt" in result.summary


def test_radius_is_echoed():
    assert analyze_buurt([], 800).stats.concurrent_radius == 800


def test_offices_are_not_amenities(make_place):
    places = [make_place(PlaceCategory.KANTOOR), make_place(PlaceCategory.CULTUUR, "museum")]
    result = analyze_buurt(places)
    assert [p.category for p in result.voorzieningen] == [PlaceCategory.CULTUUR]


def test_ov_clause_without_station(make_place):
    stops = [make_place(PlaceCategory.TRANSPORT, "stop_position", distance=250) for _ in range(4)]
    result = analyze_buurt(stops)
    assert "Goed bereikbaar met OV" in result.summary
    assert "Treinstation" not in result.summary


def test_medium_competition_clause(make_place):
    places = [make_place(PlaceCategory.HORECA_CONCURRENT, "restaurant") for _ in range(5)]
    result = analyze_buurt(places)
    assert "5 horecazaken in de buurt bieden een goede mix" in result.summary


def test_density_bands():
    assert horeca_density(5) == "laag"
    assert horeca_density(6) == "gemiddeld"
    assert horeca_density(15) == "gemiddeld"
    assert horeca_density(16) == "hoog"


def test_transport_score_counts_walking_distance_only(make_place):
    far = make_place(PlaceCategory.TRANSPORT, "stop_position", distance=300)
    near = make_place(PlaceCategory.TRANSPORT, "stop_position", distance=299)
    assert transport_score([far]) == 0
    assert transport_score([near]) == 2


def test_fractional_distances_are_accepted(make_place):
    near = make_place(PlaceCategory.TRANSPORT, "stop_position", distance=299.6)
    far = make_place(PlaceCategory.TRANSPORT, "stop_position", distance=300.4)
    cafe = make_place(PlaceCategory.HORECA_COMPLEMENTAIR, "cafe", distance=250.7)

    result = analyze_buurt([near, far, cafe], 500)

    assert result.complementair[0].distance == 250.7
    assert result.stats.transport_score == 2
    assert result.stats.horeca_count == 1


def test_voorzieningen_score_rounds_half_up():
    assert voorzieningen_score(1, 0, 0) == 2
    assert voorzieningen_score(3, 0, 0) == 5
    assert voorzieningen_score(10, 10, 10) == 10


def test_buzz_index_always_in_range():
    counts = [0, 1, 4, 6, 11, 40]
    for horeca, transport, amenities, offices in itertools.product(counts, [0, 5, 6, 10], [0, 5, 6, 10], counts):
        assert 1 <= buzz_index(horeca, transport, amenities, offices) <= 10


def test_analysis_is_repeatable(lively_places):
    assert analyze_buurt(lively_places, 500) == analyze_buurt(lively_places, 500)
