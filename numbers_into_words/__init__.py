"""
numbers_into_words — English words for unsigned 64-bit integers.

Architecture: Lexical builder (0..999) → Magnitude grouper (thousand ... quintillion)
Conjunction: "and" placement is a closed policy — none | last | below1k | all.
"""

__version__ = "1.0.0"

from .grouper import to_words  # noqa: E402
from .models import MAX_VALUE, ConjunctionPolicy  # noqa: E402

__all__ = ["ConjunctionPolicy", "MAX_VALUE", "to_words", "__version__"]
