"""Name sanitizers.

Two policies that must stay separate:

- ``sanitize_physical`` builds lower-case ASCII storage identifiers and is
  the only one whose output is ever written back into a diagram.
- ``sanitize_export_token`` builds case-preserving tokens for generated
  diagram text and also keeps Hangul so Korean names stay legible.
"""

import re

from erdkit.ir.constants import EXPORT_TOKEN_FALLBACK, PHYSICAL_NAME_FALLBACK

_PHYSICAL_DISALLOWED = re.compile(r"[^a-z0-9]")

# ASCII letters/digits, Hangul compatibility jamo (consonants, vowels), Hangul syllables
_EXPORT_DISALLOWED = re.compile(r"[^A-Za-z0-9ㄱ-ㅎㅏ-ㅣ가-힣]")

_UNDERSCORE_RUNS = re.compile(r"_+")


def _collapse_underscores(name: str) -> str:
    return _UNDERSCORE_RUNS.sub("_", name).strip("_")


def sanitize_physical(name: str) -> str:
    """
    Derive a storage-safe physical name from a display name.

    Lower-cases the input, maps everything outside ``[a-z0-9]`` to ``_``,
    collapses underscore runs and trims them from both ends.

    Args:
        name: Logical (display) name, any script

    Returns:
        Non-empty ASCII identifier (``unnamed`` if nothing survives)
    """
    result = _collapse_underscores(_PHYSICAL_DISALLOWED.sub("_", name.lower()))
    return result or PHYSICAL_NAME_FALLBACK


def sanitize_export_token(name: str) -> str:
    """
    Turn any name into an identifier token for generated diagram text.

    Args:
        name: Logical, physical or relation name

    Returns:
        Non-empty token (``entity`` if nothing survives)
    """
    result = _collapse_underscores(_EXPORT_DISALLOWED.sub("_", name))
    return result or EXPORT_TOKEN_FALLBACK
