# horecascan/services/buurt.py
# -----------------------------------------------------------------------------
# Neighborhood (buurt) analysis
# - partitions categorized places, derives BuurtStats and the buzz index
# - builds a Dutch summary from independent clauses
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from horecascan.schemas.buurt import (
    BuurtAnalysis,
    BuurtStats,
    NearbyPlace,
    PlaceCategory,
)
from horecascan.services.features import clamp, round_half_up

WALKING_DISTANCE_M = 300


def _of(places: Sequence[NearbyPlace], *categories: PlaceCategory) -> List[NearbyPlace]:
    return [p for p in places if p.category in categories]


def horeca_density(horeca_count: int) -> str:
    if horeca_count > 15:
        return "hoog"
    if horeca_count > 5:
        return "gemiddeld"
    return "laag"


def transport_score(transport: Sequence[NearbyPlace]) -> int:
    """2 points per stop within walking distance, 3 per railway station. Max 10."""
    near = sum(1 for t in transport if t.distance < WALKING_DISTANCE_M)
    stations = sum(1 for t in transport if t.type == "station")
    return min(10, round_half_up(near * 2 + stations * 3))


def voorzieningen_score(winkels: int, onderwijs: int, cultuur: int) -> int:
    return min(10, round_half_up(winkels * 1.5 + onderwijs * 2 + cultuur * 1.5))


def buzz_index(horeca_count: int, transport: int, voorzieningen: int, kantoren: int) -> int:
    """
    Bruisindex 1-10: horeca density + transport + amenities + offices.
    An empty neighborhood lands on 3.
    """
    raw = (
        (3 if horeca_count > 10 else 2 if horeca_count > 5 else 1)
        + (2 if transport > 5 else 1)
        + (2 if voorzieningen > 5 else 1)
        + (2 if kantoren > 3 else 1 if kantoren > 0 else 0)
    )
    return int(clamp(round_half_up(raw), 1, 10))


def generate_summary(
    concurrenten: Sequence[NearbyPlace],
    transport: Sequence[NearbyPlace],
    kantoren: Sequence[NearbyPlace],
    stats: BuurtStats,
    bruis: int,
) -> str:
    parts: List[str] = []

    # opening
    if bruis >= 7:
        parts.append("Dit is een levendige locatie met veel horeca-activiteit.")
    elif bruis >= 4:
        parts.append("Een locatie met gemiddelde drukte en groeipotentieel.")
    else:
        parts.append("Een rustige locatie, geschikt voor bestemmingshoreca.")

    # competition
    n = len(concurrenten)
    if n > 10:
        parts.append(
            f"Met {n} horecazaken binnen {stats.concurrent_radius}m is de concurrentie "
            "stevig; een onderscheidend concept is essentieel."
        )
    elif n > 3:
        parts.append(f"{n} horecazaken in de buurt bieden een goede mix van concurrentie en synergie.")
    else:
        parts.append(f"Slechts {n} concurrenten nabij: potentieel voor een uniek aanbod.")

    # transport
    stations = [t for t in transport if t.type == "station"]
    if stations:
        suffix = "s" if len(stations) > 1 else ""
        parts.append(f"Treinstation{suffix} binnen loopafstand, goed voor passanten.")
    elif len(transport) > 3:
        parts.append("Goed bereikbaar met OV (meerdere haltes nabij).")

    # offices
    if len(kantoren) > 5:
        parts.append(
            f"{len(kantoren)} kantoren in de buurt zorgen voor lunchverkeer en zakelijke bezoekers."
        )

    return " ".join(parts)


def analyze_buurt(places: Sequence[NearbyPlace], radius_m: int = 500) -> BuurtAnalysis:
    """
    Aggregate categorized places into neighborhood statistics.

    Args:
        places: categorized, distance-stamped places around the property.
        radius_m: radius the places were fetched with; echoed in the stats.

    Returns:
        BuurtAnalysis with partitions, stats, buzz index (1-10) and summary.
    """
    concurrenten = _of(places, PlaceCategory.HORECA_CONCURRENT)
    complementair = _of(places, PlaceCategory.HORECA_COMPLEMENTAIR)
    transport = _of(places, PlaceCategory.TRANSPORT)
    kantoren = _of(places, PlaceCategory.KANTOOR)
    winkels = _of(places, PlaceCategory.WINKEL, PlaceCategory.SUPERMARKT)
    onderwijs = _of(places, PlaceCategory.ONDERWIJS)
    cultuur = _of(places, PlaceCategory.CULTUUR)
    voorzieningen = winkels + onderwijs + cultuur

    horeca_count = len(concurrenten) + len(complementair)
    stats = BuurtStats(
        horeca_count=horeca_count,
        horeca_density=horeca_density(horeca_count),
        transport_score=transport_score(transport),
        voorzieningen_score=voorzieningen_score(len(winkels), len(onderwijs), len(cultuur)),
        kantoren_nabij=len(kantoren),
        concurrent_radius=radius_m,
    )
    bruis = buzz_index(
        horeca_count, stats.transport_score, stats.voorzieningen_score, stats.kantoren_nabij
    )
    logger.debug(
        f"[buurt] {len(places)} places, horeca={horeca_count}, "
        f"transport={stats.transport_score}, bruis={bruis}"
    )

    return BuurtAnalysis(
        concurrenten=concurrenten,
        complementair=complementair,
        transport=transport,
        voorzieningen=voorzieningen,
        stats=stats,
        buzz_index=bruis,
        summary=generate_summary(concurrenten, transport, kantoren, stats, bruis),
    )
