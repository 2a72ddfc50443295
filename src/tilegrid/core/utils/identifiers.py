"""Short random identifiers for generated tiles and groups."""

from __future__ import annotations

import random
import string
from typing import Optional

_ALPHABET = string.digits + string.ascii_lowercase
IDENTIFIER_LENGTH = 6


def generate_identifier(rng: Optional[random.Random] = None) -> str:
    """
    Return a short base-36 identifier.

    Args:
        rng: Random source (module-level random when None); pass a seeded
             Random for reproducible layouts.

    Example:
        >>> len(generate_identifier())
        6
    """
    source = rng or random
    return "".join(source.choice(_ALPHABET) for _ in range(IDENTIFIER_LENGTH))
