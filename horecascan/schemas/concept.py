# horecascan/schemas/concept.py

from typing import List, Optional

from pydantic import Field

from horecascan.schemas.base import CamelModel
from horecascan.schemas.buurt import BuurtAnalysis


class PropertyContext(CamelModel):
    surface: float  # m2
    buurt_analysis: BuurtAnalysis
    has_kitchen: Optional[bool] = None
    has_terrace: Optional[bool] = None
    seating_capacity: Optional[int] = None


class ConceptSuggestion(CamelModel):
    concept: str
    emoji: str
    score: int = Field(ge=0, le=100)
    reasoning: str
    opportunities: List[str] = Field(min_length=1)
    risks: List[str]


class ConceptAnalysis(CamelModel):
    suggestions: List[ConceptSuggestion]
    location_profile: str
