"""The fixed 18-question travel questionnaire."""

from __future__ import annotations

from mbti_travel.personality_types import (
    DIMENSION_PAIRS,
    DIMENSION_POLES,
    Answer,
    DimensionPair,
    Question,
)


def _question(
    qid: str,
    text: str,
    dimension: DimensionPair,
    options: tuple[str, str, str],
) -> Question:
    """Build a three-option question scored +2 / 0 / -2.

    The first two options carry the pair's first letter, the last option the
    second letter.
    """
    first, second = DIMENSION_POLES[dimension]
    strong, balanced, opposite = options
    return Question(
        id=qid,
        text=text,
        dimension=dimension,
        answers=[
            Answer(id=f"{qid}a1", text=strong, value=2, pole=first),
            Answer(id=f"{qid}a2", text=balanced, value=0, pole=first),
            Answer(id=f"{qid}a3", text=opposite, value=-2, pole=second),
        ],
    )


QUESTIONS: tuple[Question, ...] = (
    # Extraversion vs Introversion (E/I)
    _question("q1", "When planning a trip, you prefer to:", "EI", (
        "Research and book group tours with lots of social activities",
        "Plan some group activities but also ensure quiet time alone",
        "Focus on solo experiences or very small, intimate groups",
    )),
    _question("q2", "At your ideal travel destination, you would:", "EI", (
        "Seek out bustling markets, festivals, and social hotspots",
        "Balance popular attractions with quieter, less crowded spots",
        "Prefer secluded beaches, quiet museums, or peaceful nature walks",
    )),
    _question("q3", "When meeting other travelers, you typically:", "EI", (
        "Easily strike up conversations and make new friends",
        "Are friendly but selective about who you spend time with",
        "Prefer to observe and connect with just a few people deeply",
    )),
    _question("q4", "After a full day of traveling and sightseeing, you:", "EI", (
        "Feel energized and want to explore nightlife or social venues",
        "Enjoy a good meal and some social time before resting",
        "Need quiet time alone to recharge and process the day",
    )),
    # Sensing vs iNtuition (S/N)
    _question("q5", "When choosing a destination, what appeals to you most?", "SN", (
        "Concrete experiences: great food, comfortable hotels, proven attractions",
        "A mix of must-see sights and opportunities for discovery",
        "The potential for unique experiences and hidden meanings",
    )),
    _question("q6", "Your ideal travel guide would:", "SN", (
        "Provide detailed facts, practical tips, and tried-and-true recommendations",
        "Offer both essential information and some creative suggestions",
        "Inspire with stories, possibilities, and unconventional perspectives",
    )),
    _question("q7", "When exploring a new city, you prefer to:", "SN", (
        "Follow recommended routes and visit all the main landmarks",
        "See key sights but also allow time for spontaneous discoveries",
        "Wander freely and see where your curiosity leads you",
    )),
    _question("q8", "What type of cultural experience excites you most?", "SN", (
        "Hands-on workshops, cooking classes, or traditional crafts",
        "A combination of interactive experiences and learning opportunities",
        "Abstract art galleries, philosophical discussions, or spiritual retreats",
    )),
    _question("q9", "When documenting your travels, you focus on:", "SN", (
        "Specific details: what you ate, where you stayed, practical observations",
        "Both concrete memories and emotional impressions",
        "The deeper meaning, connections, and transformative insights",
    )),
    # Thinking vs Feeling (T/F)
    _question("q10", "When choosing between two travel options, you typically:", "TF", (
        "Compare costs, benefits, and logical pros and cons",
        "Consider both practical factors and how each option feels",
        "Go with what feels right and aligns with your values",
    )),
    _question("q11", "If something goes wrong during your trip, you:", "TF", (
        "Analyze the problem objectively and find the most efficient solution",
        "Address the practical issues while considering everyone's feelings",
        "Focus on maintaining harmony and ensuring everyone feels supported",
    )),
    _question("q12", "When choosing travel companions, you prioritize:", "TF", (
        "People who are reliable, punctual, and share similar travel goals",
        "A balance of compatibility and shared interests",
        "People you connect with emotionally and who share your values",
    )),
    _question("q13", "Your approach to travel budgeting is:", "TF", (
        "Methodical and data-driven, optimizing value for money",
        "Practical but flexible based on circumstances",
        "Flexible and values-based, spending on what matters to you personally",
    )),
    _question("q14", "When interacting with locals, you're most interested in:", "TF", (
        "Learning about systems, economics, and how things work",
        "Understanding both cultural systems and personal stories",
        "Personal stories, emotions, and human connections",
    )),
    # Judging vs Perceiving (J/P)
    _question("q15", "Your ideal travel style involves:", "JP", (
        "Detailed itineraries planned well in advance",
        "A rough framework with some flexibility built in",
        "Minimal planning and maximum spontaneity",
    )),
    _question("q16", "When your travel plans get disrupted, you:", "JP", (
        "Feel stressed and work quickly to restore order and structure",
        "Adapt reasonably well while trying to maintain some structure",
        "See it as an adventure and opportunity for unexpected discoveries",
    )),
    _question("q17", "Your packing style is:", "JP", (
        "Organized lists, everything planned and packed days in advance",
        "Generally organized but might pack some things last minute",
        "Last-minute packing, bringing what feels right in the moment",
    )),
    _question("q18", "During your trip, you prefer to:", "JP", (
        "Stick to your planned schedule and check things off your list",
        "Follow your plan but remain open to interesting opportunities",
        "Let each day unfold naturally based on your mood and discoveries",
    )),
)

TOTAL_QUESTIONS = len(QUESTIONS)

QUESTIONS_BY_DIMENSION: dict[DimensionPair, tuple[Question, ...]] = {
    pair: tuple(q for q in QUESTIONS if q.dimension == pair) for pair in DIMENSION_PAIRS
}

_QUESTIONS_BY_ID: dict[str, Question] = {q.id: q for q in QUESTIONS}


def get_question(question_id: str) -> Question | None:
    """Look up a question by ID."""
    return _QUESTIONS_BY_ID.get(question_id)


def get_questions_by_dimension(dimension: DimensionPair) -> tuple[Question, ...]:
    return QUESTIONS_BY_DIMENSION.get(dimension, ())
