from __future__ import annotations

import random

MOTIVATIONAL_QUOTES: list[str] = [
    "The expert in anything was once a beginner. - Helen Hayes",
    "Success is the sum of small efforts repeated day in and day out. - Robert Collier",
    "Education is the most powerful weapon which you can use to change the world. - Nelson Mandela",
    "The beautiful thing about learning is that no one can take it away from you. - B.B. King",
    "Study hard, for the well is deep, and our brains are shallow. - Richard Baxter",
    "Learning never exhausts the mind. - Leonardo da Vinci",
    "The roots of education are bitter, but the fruit is sweet. - Aristotle",
    "An investment in knowledge pays the best interest. - Benjamin Franklin",
]


def random_quote(rng: random.Random | None = None) -> str:
    return (rng or random).choice(MOTIVATIONAL_QUOTES)
