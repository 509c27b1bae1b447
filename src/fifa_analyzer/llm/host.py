from typing import List


## Alternatives offered while no language model is wired in.
FALLBACK_SUGGESTIONS: List[str] = [
    "You can query the database directly using the search functionality",
    "Try using specific filters in the UI to find players",
    "For this specific query about players with highest pace, you can use the sorting feature in the dashboard",
]


def answer_query(query: str) -> str:
    """
    Entry point for natural-language questions about the player pool.

    There is no model behind this yet, so it always returns the fallback
    answer: the question echoed back plus the suggested alternatives.
    Raises ValueError for an empty question.
    """
    cleaned = (query or "").strip()
    if not cleaned:
        raise ValueError("Query is required")

    suggestions = "\n".join(
        f"{i}. {text}" for i, text in enumerate(FALLBACK_SUGGESTIONS, start=1)
    )
    return (
        f'I understand you\'re asking: "{cleaned}"\n\n'
        "I'd like to help, but I'm currently unable to access the AI service "
        "due to regional restrictions. Here are some options:\n\n"
        f"{suggestions}"
    )
