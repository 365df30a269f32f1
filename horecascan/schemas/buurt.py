# horecascan/schemas/buurt.py

from enum import Enum
from typing import List, Literal

from pydantic import Field

from horecascan.schemas.base import CamelModel


class PlaceCategory(str, Enum):
    HORECA_CONCURRENT = "horeca_concurrent"  # direct competition
    HORECA_COMPLEMENTAIR = "horeca_complementair"  # horeca that drives traffic
    SUPERMARKT = "supermarkt"
    TRANSPORT = "transport"
    KANTOOR = "kantoor"
    ONDERWIJS = "onderwijs"
    WINKEL = "winkel"
    CULTUUR = "cultuur"


class PlaceLabel(CamelModel):
    category: PlaceCategory
    label: str


class NearbyPlace(CamelModel):
    name: str
    type: str
    category: PlaceCategory
    distance: float = Field(ge=0)  # meters
    lat: float
    lng: float


class BuurtStats(CamelModel):
    horeca_count: int
    horeca_density: Literal["laag", "gemiddeld", "hoog"]
    transport_score: int  # 0-10
    voorzieningen_score: int  # 0-10
    kantoren_nabij: int
    concurrent_radius: int  # meters used for the query


class BuurtAnalysis(CamelModel):
    concurrenten: List[NearbyPlace]
    complementair: List[NearbyPlace]
    transport: List[NearbyPlace]
    voorzieningen: List[NearbyPlace]
    stats: BuurtStats
    buzz_index: int = Field(ge=1, le=10)
    summary: str
