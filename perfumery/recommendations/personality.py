"""
Quiz personality analysis.

Archetypes are assigned by an ordered rule chain: the first rule whose
predicate holds wins, even when a later rule would fit the quiz answers
better.  A record with both floral/sweet and spicy/unique answers is
therefore always "The Romantic Elegant".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .models import PersonalityAnalysis, QuizPreferences


@dataclass(frozen=True)
class Archetype:
    name: str
    traits: tuple[str, str, str]
    description: str
    best_notes: tuple[str, ...]


ROMANTIC_ELEGANT = Archetype(
    name="The Romantic Elegant",
    traits=("Sophisticated", "Charming", "Timeless"),
    description="You appreciate classic, romantic fragrances that exude elegance and grace.",
    best_notes=("Rose", "Jasmine", "Vanilla", "Amber"),
)
ADVENTUROUS_EXPLORER = Archetype(
    name="The Adventurous Explorer",
    traits=("Bold", "Curious", "Free-spirited"),
    description="You love unique, unconventional scents that tell a story and make a statement.",
    best_notes=("Leather", "Incense", "Oud", "Spices"),
)
MODERN_PROFESSIONAL = Archetype(
    name="The Modern Professional",
    traits=("Confident", "Sophisticated", "Ambitious"),
    description="You prefer clean, contemporary fragrances that project success and refinement.",
    best_notes=("Citrus", "Vetiver", "Sandalwood", "Musk"),
)
CREATIVE_SOUL = Archetype(
    name="The Creative Soul",
    traits=("Artistic", "Expressive", "Unique"),
    description="You're drawn to artistic, complex compositions that inspire creativity and individuality.",
    best_notes=("Patchouli", "Incense", "Unusual Florals", "Gourmand"),
)
NATURAL_SPIRIT = Archetype(
    name="The Natural Spirit",
    traits=("Grounded", "Authentic", "Harmonious"),
    description="You love earthy, natural scents that connect you to nature and create a sense of peace.",
    best_notes=("Green Notes", "Woods", "Herbs", "Earth"),
)
CHARISMATIC_SOCIALITE = Archetype(
    name="The Charismatic Socialite",
    traits=("Magnetic", "Energetic", "Sociable"),
    description="You enjoy bright, alluring fragrances that make you memorable and draw people in.",
    best_notes=("Fruits", "Florals", "Sweet Notes", "Spices"),
)

PERSONALITY_RULES: list[tuple[Callable[[QuizPreferences], bool], Archetype]] = [
    (lambda p: p.floral_romantic and p.sweet_gourmand, ROMANTIC_ELEGANT),
    (lambda p: p.warm_spicy and p.unique, ADVENTUROUS_EXPLORER),
    (lambda p: p.citrus_energizing and p.work, MODERN_PROFESSIONAL),
    (lambda p: p.woody_earthy and p.unique, CREATIVE_SOUL),
    (lambda p: p.light_fresh and p.daily_wear, NATURAL_SPIRIT),
]

FALLBACK_ARCHETYPE = CHARISMATIC_SOCIALITE

ARCHETYPES: tuple[Archetype, ...] = tuple(a for _, a in PERSONALITY_RULES) + (FALLBACK_ARCHETYPE,)


def match_archetype(preferences: QuizPreferences) -> Archetype:
    for predicate, archetype in PERSONALITY_RULES:
        if predicate(preferences):
            return archetype
    return FALLBACK_ARCHETYPE


def analyze(preferences: QuizPreferences) -> PersonalityAnalysis:
    """Map quiz answers to a personality archetype and its description."""
    archetype = match_archetype(preferences)
    traits = list(archetype.traits)
    return PersonalityAnalysis(
        scent_personality=archetype.name,
        key_traits=traits,
        style_description=archetype.description,
        recommendation_style=(
            f"Based on your {archetype.name} personality, we recommend fragrances "
            f"that reflect your {', '.join(traits).lower()} nature."
        ),
    )


def get_personality_types() -> list[dict]:
    return [
        {
            "type": a.name,
            "traits": list(a.traits),
            "description": a.description,
            "best_notes": list(a.best_notes),
        }
        for a in ARCHETYPES
    ]
