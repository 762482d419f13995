"""MBTI dimension enums, questionnaire models and the 16 travel personality types.

Each of the four dimension pairs (EI / SN / TF / JP) has two poles. A dimension
score >= 0 resolves to E, N, F or P; a negative score to I, S, T or J.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Dimension enums
# ---------------------------------------------------------------------------
DimensionPair = Literal["EI", "SN", "TF", "JP"]
Pole = Literal["E", "I", "S", "N", "T", "F", "J", "P"]
StrengthLabel = Literal["slight", "moderate", "clear", "very clear"]
MBTICode = Literal[
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
]

DIMENSION_PAIRS: tuple[DimensionPair, ...] = get_args(DimensionPair)
ALL_POLES: tuple[Pole, ...] = get_args(Pole)
ALL_MBTI_CODES: tuple[MBTICode, ...] = get_args(MBTICode)

# pair → (first letter, second letter)
DIMENSION_POLES: dict[DimensionPair, tuple[Pole, Pole]] = {
    "EI": ("E", "I"),
    "SN": ("S", "N"),
    "TF": ("T", "F"),
    "JP": ("J", "P"),
}

_POLE_TO_DIMENSION: dict[Pole, DimensionPair] = {
    pole: pair for pair, poles in DIMENSION_POLES.items() for pole in poles
}

DEFAULT_TYPE_CODE: MBTICode = "ENFP"


def pole_dimension(pole: Pole) -> DimensionPair:
    """Return the dimension pair a pole letter belongs to."""
    try:
        return _POLE_TO_DIMENSION[pole]
    except KeyError:
        raise ValueError(f"Unknown pole letter: {pole!r}") from None


# ---------------------------------------------------------------------------
# Questionnaire models
# ---------------------------------------------------------------------------
class Answer(BaseModel):
    """One selectable option of a question."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    value: float
    pole: Pole


class Question(BaseModel):
    """A single questionnaire item tagged with its dimension pair."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    dimension: DimensionPair
    answers: tuple[Answer, ...] = Field(..., min_length=2, max_length=3)

    @model_validator(mode="after")
    def validate_answer_poles(self) -> Question:
        for answer in self.answers:
            if pole_dimension(answer.pole) != self.dimension:
                raise ValueError(
                    f"Answer '{answer.id}' has pole {answer.pole} "
                    f"which does not belong to dimension {self.dimension}"
                )
        return self

    def get_answer(self, answer_id: str) -> Answer | None:
        return next((a for a in self.answers if a.id == answer_id), None)


class UserAnswer(BaseModel):
    """A user's selection for one question."""

    model_config = ConfigDict(frozen=True)

    question_id: str = Field(..., min_length=1)
    answer_id: str = Field(..., min_length=1)
    value: float
    pole: Pole

    @classmethod
    def from_selection(cls, question: Question, answer: Answer) -> UserAnswer:
        return cls(
            question_id=question.id,
            answer_id=answer.id,
            value=answer.value,
            pole=answer.pole,
        )


# ---------------------------------------------------------------------------
# Descriptive content
# ---------------------------------------------------------------------------
class TravelStyle(BaseModel):
    """Travel recommendations attached to a personality type."""

    model_config = ConfigDict(frozen=True)

    preferences: list[str] = Field(default_factory=list, min_length=1)
    destinations: list[str] = Field(default_factory=list, min_length=1)
    activities: list[str] = Field(default_factory=list, min_length=1)
    planning_style: str = Field(..., min_length=5)
    budget_approach: str = Field(..., min_length=5)
    accommodation_style: str = Field(..., min_length=5)
    travel_companions: list[str] = Field(default_factory=list, min_length=1)


class MBTIType(BaseModel):
    """A single MBTI personality type with its travel profile."""

    model_config = ConfigDict(frozen=True)

    code: MBTICode
    name: str = Field(..., min_length=1, max_length=40)
    description: str = Field(..., min_length=5)
    characteristics: list[str] = Field(default_factory=list, min_length=1)
    travel_style: TravelStyle
    image_url: str | None = None


# ---------------------------------------------------------------------------
# Pre-defined 16 personality types
# ---------------------------------------------------------------------------
MBTI_TYPES: dict[str, MBTIType] = {
    # Analysts (NT)
    "ENTJ": MBTIType(
        code="ENTJ",
        name="The Commander",
        description="Strategic and goal-oriented travelers who love luxury experiences and efficient planning.",
        characteristics=["Strategic planning", "Confident leadership", "Efficient execution", "Goal achievement", "Resource optimization"],
        travel_style=TravelStyle(
            preferences=["Luxury", "Business travel", "Achievement-oriented"],
            destinations=["Major cities", "Business hubs", "Prestigious locations"],
            activities=["Networking events", "Executive tours", "Cultural landmarks", "Fine dining"],
            planning_style="Highly structured with detailed itineraries",
            budget_approach="Premium budget for quality experiences",
            accommodation_style="Luxury hotels and executive suites",
            travel_companions=["Business associates", "Fellow leaders"],
        ),
        image_url="/images/entj-character.svg",
    ),
    "ENTP": MBTIType(
        code="ENTP",
        name="The Debater",
        description="Innovative and spontaneous travelers who thrive on new ideas and unexpected discoveries.",
        characteristics=["Creative exploration", "Spontaneous adventures", "Intellectual curiosity", "Social networking", "Innovation seeking"],
        travel_style=TravelStyle(
            preferences=["Innovation", "Spontaneity", "Intellectual stimulation"],
            destinations=["Tech hubs", "Creative cities", "Emerging destinations"],
            activities=["Startup tours", "Innovation labs", "Debates", "Brainstorming sessions"],
            planning_style="Flexible framework with room for spontaneity",
            budget_approach="Strategic spending on unique experiences",
            accommodation_style="Boutique hotels and creative spaces",
            travel_companions=["Fellow innovators", "Diverse groups"],
        ),
        image_url="/images/entp-character.svg",
    ),
    "INTJ": MBTIType(
        code="INTJ",
        name="The Architect",
        description="Independent and strategic travelers who prefer well-researched, meaningful journeys.",
        characteristics=["Strategic research", "Independent exploration", "Meaningful experiences", "Efficient planning", "Knowledge seeking"],
        travel_style=TravelStyle(
            preferences=["Independence", "Deep exploration", "Knowledge acquisition"],
            destinations=["Historical sites", "Museums", "Architectural wonders"],
            activities=["Research", "Self-guided tours", "Photography", "Learning"],
            planning_style="Meticulously researched and well-structured",
            budget_approach="Value-focused with strategic investments",
            accommodation_style="Quality over luxury, privacy important",
            travel_companions=["Solo travel", "Close friends", "Like-minded individuals"],
        ),
        image_url="/images/intj-character.svg",
    ),
    "INTP": MBTIType(
        code="INTP",
        name="The Thinker",
        description="Curious and analytical travelers who enjoy exploring ideas and unconventional paths.",
        characteristics=["Analytical exploration", "Curiosity-driven", "Unconventional paths", "Deep thinking", "Flexible approach"],
        travel_style=TravelStyle(
            preferences=["Curiosity", "Analysis", "Unconventional experiences"],
            destinations=["Off-beat locations", "Research facilities", "Natural phenomena"],
            activities=["Research", "Analysis", "Exploration", "Learning"],
            planning_style="Loose structure with flexibility for discoveries",
            budget_approach="Economical with splurges on interesting finds",
            accommodation_style="Simple but comfortable, location matters",
            travel_companions=["Solo travel", "Fellow thinkers", "Small groups"],
        ),
        image_url="/images/intp-character.svg",
    ),
    # Diplomats (NF)
    "ENFJ": MBTIType(
        code="ENFJ",
        name="The Protagonist",
        description="Inspiring and people-focused travelers who create meaningful connections and experiences.",
        characteristics=["People connection", "Cultural immersion", "Inspiring others", "Meaningful experiences", "Group harmony"],
        travel_style=TravelStyle(
            preferences=["Cultural immersion", "People connection", "Meaningful impact"],
            destinations=["Cultural centers", "Community projects", "Diverse societies"],
            activities=["Cultural exchange", "Volunteer work", "Local interactions", "Group activities"],
            planning_style="Collaborative planning with group input",
            budget_approach="Balanced with emphasis on experiences",
            accommodation_style="Local homestays and cultural accommodation",
            travel_companions=["Large groups", "Cultural exchange partners", "Community groups"],
        ),
        image_url="/images/enfj-character.svg",
    ),
    "ENFP": MBTIType(
        code="ENFP",
        name="The Campaigner",
        description="Enthusiastic and creative travelers who seek authentic experiences and human connections.",
        characteristics=["Enthusiastic exploration", "Authentic experiences", "Creative adventures", "Human connections", "Spontaneous fun"],
        travel_style=TravelStyle(
            preferences=["Authenticity", "Creativity", "Human connection"],
            destinations=["Vibrant cities", "Artistic communities", "Festival locations"],
            activities=["Festivals", "Art scenes", "Local culture", "Adventure sports"],
            planning_style="Spontaneous with some loose planning",
            budget_approach="Experience-focused spending",
            accommodation_style="Unique and authentic places",
            travel_companions=["Friends", "Fellow adventurers", "Local communities"],
        ),
        image_url="/images/enfp-character.svg",
    ),
    "INFJ": MBTIType(
        code="INFJ",
        name="The Advocate",
        description="Thoughtful and purposeful travelers who seek deep, transformative experiences.",
        characteristics=["Purposeful journeys", "Deep reflection", "Transformative experiences", "Meaningful connections", "Personal growth"],
        travel_style=TravelStyle(
            preferences=["Purpose", "Transformation", "Deep meaning"],
            destinations=["Spiritual sites", "Natural retreats", "Historical significance"],
            activities=["Meditation", "Reflection", "Spiritual practices", "Nature connection"],
            planning_style="Thoughtful and purposeful planning",
            budget_approach="Mindful spending on meaningful experiences",
            accommodation_style="Peaceful and contemplative spaces",
            travel_companions=["Solo travel", "Kindred spirits", "Small meaningful groups"],
        ),
        image_url="/images/infj-character.svg",
    ),
    "INFP": MBTIType(
        code="INFP",
        name="The Mediator",
        description="Values-driven and authentic travelers who seek personal meaning and creative inspiration.",
        characteristics=["Values alignment", "Creative inspiration", "Authentic experiences", "Personal meaning", "Gentle exploration"],
        travel_style=TravelStyle(
            preferences=["Authenticity", "Values alignment", "Creative inspiration"],
            destinations=["Artistic locations", "Natural beauty", "Peaceful places"],
            activities=["Creative pursuits", "Nature photography", "Local crafts", "Quiet exploration"],
            planning_style="Flexible with personal meaning focus",
            budget_approach="Thoughtful spending aligned with values",
            accommodation_style="Authentic and value-aligned places",
            travel_companions=["Solo travel", "Close friends", "Like-minded travelers"],
        ),
        image_url="/images/infp-character.svg",
    ),
    # Sentinels (SJ)
    "ESTJ": MBTIType(
        code="ESTJ",
        name="The Executive",
        description="Organized and efficient travelers who prefer structured trips with clear objectives.",
        characteristics=["Organized efficiency", "Clear objectives", "Group leadership", "Practical planning", "Time management"],
        travel_style=TravelStyle(
            preferences=["Organization", "Efficiency", "Clear planning"],
            destinations=["Well-established destinations", "Historical sites", "Business centers"],
            activities=["Guided tours", "Organized activities", "Historical exploration", "Cultural sites"],
            planning_style="Highly organized with detailed schedules",
            budget_approach="Practical and well-budgeted",
            accommodation_style="Reliable hotels with good service",
            travel_companions=["Family", "Organized groups", "Business associates"],
        ),
        image_url="/images/estj-character.svg",
    ),
    "ESFJ": MBTIType(
        code="ESFJ",
        name="The Consul",
        description="Caring and social travelers who focus on group harmony and shared experiences.",
        characteristics=["Group harmony", "Social connection", "Caring support", "Shared experiences", "Cultural appreciation"],
        travel_style=TravelStyle(
            preferences=["Group harmony", "Social experiences", "Cultural appreciation"],
            destinations=["Popular destinations", "Cultural sites", "Family-friendly locations"],
            activities=["Group dining", "Cultural shows", "Shopping", "Social activities"],
            planning_style="Considerate planning for group needs",
            budget_approach="Fair and inclusive for all group members",
            accommodation_style="Comfortable accommodations for everyone",
            travel_companions=["Family", "Friends", "Social groups"],
        ),
        image_url="/images/esfj-character.svg",
    ),
    "ISTJ": MBTIType(
        code="ISTJ",
        name="The Logistician",
        description="Reliable and methodical travelers who prefer tried-and-true destinations with historical significance.",
        characteristics=["Methodical planning", "Historical appreciation", "Reliable execution", "Traditional values", "Detailed preparation"],
        travel_style=TravelStyle(
            preferences=["Reliability", "Tradition", "Historical significance"],
            destinations=["Historical landmarks", "Well-established destinations", "Cultural heritage sites"],
            activities=["Historical tours", "Museums", "Traditional experiences", "Educational activities"],
            planning_style="Detailed and traditional planning approach",
            budget_approach="Conservative and well-planned budget",
            accommodation_style="Traditional hotels with proven quality",
            travel_companions=["Family", "Long-term friends", "Traditional groups"],
        ),
        image_url="/images/istj-character.svg",
    ),
    "ISFJ": MBTIType(
        code="ISFJ",
        name="The Protector",
        description="Caring and considerate travelers who prioritize comfort and meaningful connections.",
        characteristics=["Caring consideration", "Comfort prioritization", "Meaningful connections", "Safety focus", "Service orientation"],
        travel_style=TravelStyle(
            preferences=["Comfort", "Safety", "Meaningful connections"],
            destinations=["Safe destinations", "Comfortable locations", "Family-friendly places"],
            activities=["Relaxation", "Local culture", "Family activities", "Gentle exploration"],
            planning_style="Careful planning with safety and comfort focus",
            budget_approach="Practical with emphasis on comfort and safety",
            accommodation_style="Comfortable and safe accommodations",
            travel_companions=["Family", "Close friends", "Loved ones"],
        ),
        image_url="/images/isfj-character.svg",
    ),
    # Explorers (SP)
    "ESTP": MBTIType(
        code="ESTP",
        name="The Entrepreneur",
        description="Bold and adaptable travelers who seek excitement and hands-on adventures.",
        characteristics=["Bold adventures", "Adaptability", "Hands-on experiences", "Excitement seeking", "Social energy"],
        travel_style=TravelStyle(
            preferences=["Adventure", "Excitement", "Hands-on experiences"],
            destinations=["Adventure hotspots", "Active destinations", "Vibrant cities"],
            activities=["Extreme sports", "Adventure activities", "Nightlife", "Active exploration"],
            planning_style="Minimal planning with maximum flexibility",
            budget_approach="Spontaneous spending on adventures",
            accommodation_style="Active and social accommodations",
            travel_companions=["Adventure buddies", "Active groups", "Fellow thrill-seekers"],
        ),
        image_url="/images/estp-character.svg",
    ),
    "ESFP": MBTIType(
        code="ESFP",
        name="The Entertainer",
        description="Spontaneous and fun-loving travelers who enjoy people, experiences, and living in the moment.",
        characteristics=["Spontaneous fun", "People enjoyment", "Living in the moment", "Experience focus", "Social connection"],
        travel_style=TravelStyle(
            preferences=["Fun", "Spontaneity", "Social experiences"],
            destinations=["Fun destinations", "Social hotspots", "Entertainment centers"],
            activities=["Parties", "Shows", "Social events", "Entertainment"],
            planning_style="Spontaneous with focus on fun",
            budget_approach="Experience-focused with social activities",
            accommodation_style="Fun and social accommodations",
            travel_companions=["Friends", "Party groups", "Social circles"],
        ),
        image_url="/images/esfp-character.svg",
    ),
    "ISTP": MBTIType(
        code="ISTP",
        name="The Virtuoso",
        description="Independent and practical travelers who enjoy hands-on exploration and mechanical challenges.",
        characteristics=["Independent exploration", "Practical skills", "Hands-on learning", "Mechanical interest", "Quiet observation"],
        travel_style=TravelStyle(
            preferences=["Independence", "Hands-on experiences", "Practical exploration"],
            destinations=["Technical sites", "Natural environments", "Workshop locations"],
            activities=["Hands-on workshops", "Technical tours", "Outdoor skills", "Independent exploration"],
            planning_style="Minimal structure with practical focus",
            budget_approach="Practical spending on useful experiences",
            accommodation_style="Simple but functional accommodations",
            travel_companions=["Solo travel", "Small groups", "Fellow practitioners"],
        ),
        image_url="/images/istp-character.svg",
    ),
    "ISFP": MBTIType(
        code="ISFP",
        name="The Adventurer",
        description="Gentle and artistic travelers who seek beauty, harmony, and personal expression.",
        characteristics=["Gentle exploration", "Artistic appreciation", "Beauty seeking", "Harmony focus", "Personal expression"],
        travel_style=TravelStyle(
            preferences=["Beauty", "Harmony", "Artistic expression"],
            destinations=["Beautiful landscapes", "Artistic locations", "Peaceful places"],
            activities=["Art appreciation", "Photography", "Creative pursuits", "Nature connection"],
            planning_style="Gentle planning with aesthetic focus",
            budget_approach="Value-conscious with beauty appreciation",
            accommodation_style="Beautiful and harmonious accommodations",
            travel_companions=["Solo travel", "Close friends", "Artistic companions"],
        ),
        image_url="/images/isfp-character.svg",
    ),
}


class UnknownTypeCodeError(KeyError):
    """Raised when a code has no entry in the descriptive catalog."""


def get_mbti_type(code: str) -> MBTIType | None:
    """Look up a personality type by its 4-letter code."""
    return MBTI_TYPES.get(code)


def require_mbti_type(code: str) -> MBTIType:
    """Like :func:`get_mbti_type` but raises for unknown codes."""
    mbti_type = MBTI_TYPES.get(code)
    if mbti_type is None:
        raise UnknownTypeCodeError(code)
    return mbti_type


def is_valid_mbti_code(code: str) -> bool:
    return code in MBTI_TYPES


def get_all_mbti_codes() -> list[str]:
    return list(MBTI_TYPES)


def get_travel_recommendations(code: str) -> TravelStyle | None:
    """Return the travel style for *code*, or ``None`` if the type is unknown."""
    mbti_type = MBTI_TYPES.get(code)
    return mbti_type.travel_style if mbti_type else None
