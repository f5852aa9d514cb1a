import random
from typing import Optional, Sequence, Tuple

WORDS: Tuple[str, ...] = (
    "acid", "amber", "atom", "beaker", "bright", "bond", "burner", "calm",
    "carbon", "cloud", "copper", "crystal", "delta", "dusk", "ember", "field",
    "flask", "flint", "frost", "gas", "glass", "gold", "harbor", "helium",
    "iron", "jade", "lab", "lemon", "light", "maple", "metal", "mist",
    "neon", "north", "ocean", "orbit", "oxide", "pearl", "pine", "prism",
    "quartz", "rain", "river", "salt", "silver", "smoke", "solid", "spark",
    "steel", "stone", "storm", "sun", "tide", "titan", "valve", "vapor",
    "wave", "wind", "zinc", "zest",
)


class WordPairService:
    """Produces random two-word combinations for the demo screen."""

    def __init__(self, words: Sequence[str] = WORDS, rng: Optional[random.Random] = None):
        if len(words) < 1:
            raise ValueError("At least one word is required.")
        self.words = tuple(word.lower() for word in words)
        self.rng = rng or random.Random()

    def random_pair(self) -> Tuple[str, str]:
        return self.rng.choice(self.words), self.rng.choice(self.words)

    @staticmethod
    def as_pascal_case(first: str, second: str) -> str:
        return first.capitalize() + second.capitalize()

    @staticmethod
    def as_lower_case(first: str, second: str) -> str:
        return f"{first}{second}".lower()
