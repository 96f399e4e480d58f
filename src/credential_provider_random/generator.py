"""Random string generation.

This module draws characters from a fixed alphabet using an injected
pseudo-random source. The source is not assumed to be cryptographically
secure; a seeded source gives reproducible output.
"""

import random
import string

DEFAULT_ALPHABET = string.ascii_letters + string.digits + "!@#$%&*"


def generate(rng: random.Random, alphabet: str, length: int) -> str:
    """Generate a string of ``length`` characters drawn from ``alphabet``.

    Each position draws one index uniformly from ``[0, len(alphabet))``,
    advancing ``rng`` once per character.

    Args:
        rng: The random source to draw from.
        alphabet: Non-empty sequence of eligible characters.
        length: Number of characters to generate.

    Returns:
        The generated string. A length of zero yields an empty string.
    """
    buf = [""] * length
    for i in range(length):
        buf[i] = alphabet[rng.randrange(len(alphabet))]
    return "".join(buf)
