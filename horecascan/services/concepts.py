# horecascan/services/concepts.py
# -----------------------------------------------------------------------------
# "Wat past hier?" - rank horeca concepts for a property
# - each concept is a ConceptScorer with score / opportunities / risks
# - CONCEPT_CATALOG order breaks score ties
# -----------------------------------------------------------------------------
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from loguru import logger

from horecascan.schemas.buurt import NearbyPlace
from horecascan.schemas.concept import ConceptAnalysis, ConceptSuggestion, PropertyContext
from horecascan.services.features import clamp

TOP_N = 5


def _count_type(places: Sequence[NearbyPlace], *types: str) -> int:
    return sum(1 for p in places if p.type in types)


class ConceptScorer(ABC):
    """One candidate business format. Subclasses hold pure rules over a PropertyContext."""

    concept: str = ""
    emoji: str = ""
    fallback_opportunity: str = "Horeca blijft groeien in Nederland"

    @abstractmethod
    def raw_score(self, ctx: PropertyContext) -> float:
        ...

    def score(self, ctx: PropertyContext) -> int:
        return int(clamp(self.raw_score(ctx), 0, 100))

    def opportunities(self, ctx: PropertyContext) -> List[str]:
        return self.specific_opportunities(ctx) or [self.fallback_opportunity]

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        return []

    def risks(self, ctx: PropertyContext) -> List[str]:
        return []


class SpecialtyCoffeeBar(ConceptScorer):
    """Near offices, few cafés, small floor plan is fine."""

    concept = "Specialty Koffiebar"
    emoji = "☕"
    fallback_opportunity = "Groeiende vraag naar specialty koffie in Nederland"

    def raw_score(self, ctx: PropertyContext) -> float:
        b = ctx.buurt_analysis
        s = 50
        if b.stats.kantoren_nabij > 3:
            s += 20
        if b.stats.kantoren_nabij > 6:
            s += 10
        cafes = _count_type(b.complementair, "cafe")
        if cafes < 3:
            s += 15
        if cafes > 6:
            s -= 15
        if 40 <= ctx.surface <= 120:
            s += 10
        if b.stats.transport_score >= 6:
            s += 10
        if ctx.surface < 30:
            s -= 10
        return s

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        b = ctx.buurt_analysis
        opps: List[str] = []
        if b.stats.kantoren_nabij > 3:
            opps.append("Veel kantoren nabij voor ochtend- en lunchverkeer")
        if b.stats.transport_score >= 6:
            opps.append("Goede OV-bereikbaarheid trekt passanten")
        if ctx.surface <= 80:
            opps.append("Compact formaat houdt overheadkosten laag")
        if ctx.has_terrace:
            opps.append("Terras voor extra capaciteit in de zomer")
        return opps

    def risks(self, ctx: PropertyContext) -> List[str]:
        b = ctx.buurt_analysis
        risks: List[str] = []
        cafes = _count_type(b.complementair, "cafe")
        if cafes > 4:
            risks.append(f"{cafes} bestaande cafés in de buurt")
        if b.stats.kantoren_nabij < 2:
            risks.append("Weinig kantoren nabij, dus minder lunchverkeer")
        if ctx.surface > 150:
            risks.append("Groot oppervlak voor een koffiebar: hoge vaste kosten")
        return risks


class Restaurant(ConceptScorer):
    concept = "Restaurant"
    emoji = "🍽️"

    def raw_score(self, ctx: PropertyContext) -> float:
        b = ctx.buurt_analysis
        s = 40
        if 80 <= ctx.surface <= 300:
            s += 15
        if ctx.has_kitchen:
            s += 15
        if b.buzz_index >= 6:
            s += 15
        if 5 < b.stats.horeca_count < 15:  # some competition means foot traffic
            s += 10
        if ctx.seating_capacity and ctx.seating_capacity >= 40:
            s += 10
        if ctx.has_terrace:
            s += 5
        if ctx.surface < 60:
            s -= 15
        return s

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        opps: List[str] = []
        if ctx.has_kitchen:
            opps.append("Bestaande keuken bespaart verbouwingskosten")
        if ctx.buurt_analysis.buzz_index >= 6:
            opps.append("Levendige buurt met veel passanten")
        if ctx.has_terrace:
            opps.append("Terras verhoogt capaciteit en omzet in zomermaanden")
        if ctx.surface >= 100:
            opps.append("Ruim pand voor flexibele inrichting")
        return opps

    def risks(self, ctx: PropertyContext) -> List[str]:
        risks: List[str] = []
        restaurants = _count_type(ctx.buurt_analysis.concurrenten, "restaurant")
        if restaurants > 8:
            risks.append(f"{restaurants} restaurants in directe omgeving: hoge concurrentie")
        if not ctx.has_kitchen:
            risks.append("Geen bestaande keuken, dus verbouwingskosten")
        if ctx.surface < 80:
            risks.append("Beperkt oppervlak voor een volwaardig restaurant")
        return risks


class Lunchroom(ConceptScorer):
    concept = "Lunchroom / Broodjeszaak"
    emoji = "🥪"

    def raw_score(self, ctx: PropertyContext) -> float:
        b = ctx.buurt_analysis
        s = 45
        if b.stats.kantoren_nabij > 2:
            s += 20
        if 30 <= ctx.surface <= 100:
            s += 10
        if b.stats.transport_score >= 5:
            s += 10
        lunch_spots = _count_type(b.concurrenten, "fast_food")
        if lunch_spots < 3:
            s += 10
        if lunch_spots > 6:
            s -= 10
        return s

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        opps: List[str] = []
        if ctx.buurt_analysis.stats.kantoren_nabij > 2:
            opps.append("Kantoormedewerkers als vaste klanten")
        if ctx.surface <= 80:
            opps.append("Lage overhead door compact formaat")
        opps.append("Lagere startkosten dan een restaurant")
        return opps

    def risks(self, ctx: PropertyContext) -> List[str]:
        risks: List[str] = []
        if ctx.buurt_analysis.stats.kantoren_nabij < 2:
            risks.append("Weinig kantoren, beperkt lunchverkeer")
        if ctx.surface > 120:
            risks.append("Groot pand voor een lunchroom; overweeg een dubbel concept")
        return risks


class CocktailBar(ConceptScorer):
    concept = "Cocktailbar / Café-Bar"
    emoji = "🍸"
    fallback_opportunity = "Cocktailcultuur groeit in Nederlandse steden"

    def raw_score(self, ctx: PropertyContext) -> float:
        b = ctx.buurt_analysis
        s = 40
        if b.buzz_index >= 7:
            s += 20
        if 50 <= ctx.surface <= 200:
            s += 10
        bars = _count_type(b.concurrenten, "bar", "pub")
        if 2 < bars < 8:  # cluster effect
            s += 10
        if b.stats.transport_score >= 5:
            s += 10
        if ctx.has_terrace:
            s += 5
        if b.buzz_index < 4:
            s -= 15
        return s

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        b = ctx.buurt_analysis
        opps: List[str] = []
        if b.buzz_index >= 7:
            opps.append("Uitgaansbuurt met veel nachtelijk verkeer")
        if _count_type(b.concurrenten, "bar", "pub") > 2:
            opps.append("Cluster-effect: meerdere bars trekken gezamenlijk publiek")
        if ctx.has_terrace:
            opps.append("Terras voor zomermaanden")
        return opps

    def risks(self, ctx: PropertyContext) -> List[str]:
        risks: List[str] = []
        if ctx.buurt_analysis.buzz_index < 5:
            risks.append("Rustige buurt, minder geschikt voor avondhoreca")
        if ctx.surface > 200:
            risks.append("Groot oppervlak: hoge vaste kosten voor een bar")
        return risks


class DarkKitchen(ConceptScorer):
    """Delivery only; foot traffic does not matter, cheaper quiet areas help."""

    concept = "Dark Kitchen / Bezorgkeuken"
    emoji = "🔥"

    def raw_score(self, ctx: PropertyContext) -> float:
        b = ctx.buurt_analysis
        s = 35
        if 30 <= ctx.surface <= 80:
            s += 15
        if ctx.has_kitchen:
            s += 20
        if b.buzz_index < 4:
            s += 10
        if b.stats.transport_score >= 3:  # riders still need access
            s += 5
        return s

    def specific_opportunities(self, ctx: PropertyContext) -> List[str]:
        opps: List[str] = []
        if ctx.has_kitchen:
            opps.append("Bestaande keuken: minimale verbouwing nodig")
        if ctx.buurt_analysis.buzz_index < 5:
            opps.append("Lagere huurprijs in rustiger gebied, ideaal voor bezorgmodel")
        opps.append("Geen terras of zaal nodig, focus op keukenefficiëntie")
        opps.append("Bezorgmarkt groeit jaarlijks met 15-20%")
        return opps

    def risks(self, ctx: PropertyContext) -> List[str]:
        risks: List[str] = []
        if not ctx.has_kitchen:
            risks.append("Keukeninstallatie nodig, extra investering")
        risks.append("Hoge commissies bezorgplatforms (25-30%)")
        return risks


CONCEPT_CATALOG: Sequence[ConceptScorer] = (
    SpecialtyCoffeeBar(),
    Restaurant(),
    Lunchroom(),
    CocktailBar(),
    DarkKitchen(),
)


def reasoning_for(concept: str, score: int) -> str:
    if score >= 70:
        return (
            f"Dit pand is uitstekend geschikt voor een {concept}. "
            "De locatie en kenmerken sluiten goed aan bij dit concept."
        )
    if score >= 50:
        return f"Een {concept} is een solide optie voor dit pand, met enkele aandachtspunten."
    return f"Een {concept} is mogelijk, maar er zijn uitdagingen om rekening mee te houden."


def location_profile(ctx: PropertyContext) -> str:
    b = ctx.buurt_analysis
    if b.buzz_index >= 7:
        opening = (
            f"Dit pand ligt in een levendige buurt met veel horeca-activiteit "
            f"(bruisindex {b.buzz_index}/10). "
        )
    elif b.buzz_index >= 4:
        opening = (
            f"De buurt heeft een gemiddelde drukte met groeipotentieel "
            f"(bruisindex {b.buzz_index}/10). "
        )
    else:
        opening = (
            f"Dit is een rustige locatie, geschikt voor bestemmingshoreca "
            f"(bruisindex {b.buzz_index}/10). "
        )
    return (
        opening
        + f"{b.stats.horeca_count} horecazaken, {b.stats.kantoren_nabij} kantoren "
        f"en bereikbaarheid {b.stats.transport_score}/10."
    )


def recommend_concepts(
    ctx: PropertyContext, catalog: Sequence[ConceptScorer] = CONCEPT_CATALOG
) -> List[ConceptSuggestion]:
    """Score every concept, best first (stable on ties), keep the top five."""
    scored = [(scorer, scorer.score(ctx)) for scorer in catalog]
    ranked = sorted(scored, key=lambda pair: pair[1], reverse=True)[:TOP_N]

    return [
        ConceptSuggestion(
            concept=scorer.concept,
            emoji=scorer.emoji,
            score=score,
            reasoning=reasoning_for(scorer.concept, score),
            opportunities=scorer.opportunities(ctx),
            risks=scorer.risks(ctx),
        )
        for scorer, score in ranked
    ]


def generate_concept_suggestions(
    ctx: PropertyContext, catalog: Sequence[ConceptScorer] = CONCEPT_CATALOG
) -> ConceptAnalysis:
    suggestions = recommend_concepts(ctx, catalog)
    if suggestions:
        logger.debug(
            f"[concepts] surface={ctx.surface:g}m2 top={suggestions[0].concept} ({suggestions[0].score})"
        )
    return ConceptAnalysis(suggestions=suggestions, location_profile=location_profile(ctx))
