from __future__ import annotations

import re
from typing import NamedTuple

from tenji.base import Consonant, Core

# (consonant)(doubled consonant)(Y)(vowel) | (special)
_re_mora = re.compile(
    r"(?P<consonant>[KSTNHMRGZDBPYW])?"
    r"(?P<geminated>(?P=consonant))?"
    r"(?P<palatalized>Y)?"
    r"(?P<vowel>[AIUEO])"
    r"|(?P<special>[-N])"
)


class DecompositionError(ValueError):
    """Raised when a token is not a romanized mora."""

    def __init__(self, token: str, reason: str = "not a supported mora") -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Cannot decompose token {token!r}: {reason}")


class Decomposition(NamedTuple):
    core: Core
    consonant: Consonant | None = None
    geminated: bool = False
    palatalized: bool = False


def decompose(token: str) -> Decomposition:
    """Split one token into its consonant, gemination, palatalization and core.

    Args:
        token: A single mora such as ``"KA"``, ``"GGYA"``, ``"N"`` or ``"-"``.

    Returns:
        The decomposition of the token.

    Raises:
        DecompositionError: If the token does not match the mora grammar.

    Examples:
        >>> decompose("KYA")
        Decomposition(core=<Core.A: 'A'>, consonant=<Consonant.K: 'K'>, geminated=False, palatalized=True)

        >>> decompose("-")
        Decomposition(core=<Core.LONG: '-'>, consonant=None, geminated=False, palatalized=False)
    """
    if not token:
        raise DecompositionError(token, "empty token")

    match = _re_mora.fullmatch(token)
    if match is None:
        raise DecompositionError(token)

    if match["special"]:
        return Decomposition(core=Core(match["special"]))

    return Decomposition(
        core=Core(match["vowel"]),
        consonant=Consonant(match["consonant"]) if match["consonant"] else None,
        geminated=match["geminated"] is not None,
        palatalized=match["palatalized"] is not None,
    )


__all__ = ("Decomposition", "DecompositionError", "decompose")
