"""
Application constants.

Storage keys, defaults and the fixed texts used for sample data and
placeholder flashcards.
"""

FLASHCARDS_KEY = "flashcards"
COUNTERS_KEY = "counters"

DEFAULT_SET_NAME = "General"

DEFAULT_COUNTERS = {"flashcardId": 1, "setId": 1}

PLACEHOLDER_FRONT_TEMPLATE = "Welcome to {name}"
PLACEHOLDER_BACK = "This is your new flashcard set. Edit or delete this card and add your own!"

SAMPLE_FLASHCARDS: list[tuple[str, str, str]] = [
    ("Hvad er hovedstaden i Danmark?", "København", "Geografi"),
    ("Hvad er 2 + 2?", "4", "Matematik"),
    ('Hvem skrev "To be or not to be"?', "William Shakespeare", "Litteratur"),
]

# Counters after seeding: next flashcard id follows the sample ids
SAMPLE_COUNTERS = {"flashcardId": len(SAMPLE_FLASHCARDS) + 1, "setId": 1}
