"""Starter collection seeded on first run."""

import random
from collections.abc import Sequence
from datetime import datetime

from flashdeck.domain.common.clock import utc_now
from flashdeck.domain.learning.entities import Deck, Flashcard

# (name, description, cards); a card is (front, back, front_language, back_language)
_SAMPLE_DECKS: list[tuple[str, str, list[tuple[str, str, str | None, str | None]]]] = [
    (
        "JavaScript Basics",
        "Essential JavaScript concepts and syntax",
        [
            (
                "What is a closure in JavaScript?",
                "A closure is a function that has access to variables in its outer "
                "(enclosing) scope even after the outer function has returned.",
                None,
                None,
            ),
            (
                "How do you declare a variable in JavaScript?",
                "let variableName = value;\nconst constantName = value;\nvar oldStyle = value;",
                None,
                "javascript",
            ),
            (
                "JavaScript Array Methods",
                "const arr = [1, 2, 3, 4, 5];\n"
                "const doubled = arr.map(x => x * 2);\n"
                "const evens = arr.filter(x => x % 2 === 0);\n"
                "const sum = arr.reduce((acc, x) => acc + x, 0);",
                None,
                "javascript",
            ),
        ],
    ),
    (
        "Python Fundamentals",
        "Core Python programming concepts",
        [
            ("How do you create a list in Python?", "my_list = [1, 2, 3, 4, 5]", None, "python"),
            (
                "What is a Python dictionary?",
                "A collection of key-value pairs, e.g. person = {'name': 'John', 'age': 30}",
                None,
                None,
            ),
            (
                "Python List Comprehension",
                "squares = [x**2 for x in range(10)]\n"
                "evens = [x for x in range(20) if x % 2 == 0]",
                None,
                "python",
            ),
        ],
    ),
    (
        "Mathematics",
        "Basic math formulas and concepts",
        [
            (
                "What is the Pythagorean theorem?",
                "a² + b² = c², where c is the hypotenuse of a right triangle.",
                None,
                None,
            ),
            (
                "What is the quadratic formula?",
                "x = (-b ± √(b² - 4ac)) / 2a, solving ax² + bx + c = 0",
                None,
                None,
            ),
            (
                "Derivative Rules",
                "Power: d/dx[x^n] = nx^(n-1)\n"
                "Product: d/dx[f·g] = f'g + fg'\n"
                "Chain: d/dx[f(g(x))] = f'(g(x))·g'(x)",
                None,
                None,
            ),
        ],
    ),
    (
        "HTML & CSS",
        "Web development fundamentals",
        [
            (
                "CSS Flexbox Properties",
                ".container {\n    display: flex;\n    justify-content: center;\n"
                "    align-items: center;\n}",
                None,
                "css",
            ),
            (
                "What is semantic HTML?",
                "HTML whose elements describe the content structure, such as "
                "<header>, <nav>, <main>, <article> and <footer>.",
                None,
                None,
            ),
        ],
    ),
]


def generate_sample_data(
    palette: Sequence[str],
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> tuple[list[Deck], list[Flashcard]]:
    """Build the four starter decks with immediately due cards."""
    rng = rng or random.Random()
    created_at = now or utc_now()
    decks: list[Deck] = []
    cards: list[Flashcard] = []
    for name, description, entries in _SAMPLE_DECKS:
        deck = Deck.create(
            name=name, description=description, color=rng.choice(list(palette)), now=created_at
        )
        decks.append(deck)
        cards.extend(
            Flashcard.create(
                deck_id=deck.id,
                front=front,
                back=back,
                front_language=front_language,
                back_language=back_language,
                now=created_at,
            )
            for front, back, front_language, back_language in entries
        )
    return decks, cards
