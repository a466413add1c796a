"""enigma_sim.plugboard.

The plugboard (Steckerbrett) swaps letters in pairs before the signal enters
the rotor stack and again after it leaves. Each wired pair is stored in both
directions, so the mapping is an involution by construction.

"""

from __future__ import annotations

import structlog

from .errors import (
    DuplicatePlugError,
    EnigmaError,
    InvalidCharacterError,
    PairCountError,
    SamePairError,
)
from .tables import index_of

logger = structlog.get_logger(__name__)


class Plugboard:
    """Involutive partial substitution over the alphabet."""

    def __init__(self) -> None:
        # Insertion-ordered; holds both a->b and b->a.
        self._mapping: dict[str, str] = {}

    def pairs(self) -> str:
        """Return every plugged letter in wiring order, e.g. ``"ABCX"``."""
        return "".join(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping) // 2

    def add_pair(self, a: str, b: str) -> tuple[str, str]:
        """Wire `a` and `b` together.

        Args:
            a: First letter (case-insensitive).
            b: Second letter (case-insensitive).

        Returns:
            The uppercased pair.

        Raises:
            InvalidCharacterError: If a letter is outside the alphabet.
            SamePairError: If both letters are the same.
            DuplicatePlugError: If a letter is already plugged.

        """
        for ch in (a, b):
            if index_of(ch) < 0:
                raise InvalidCharacterError(ch)
        x = a.upper()
        y = b.upper()
        if x == y:
            raise SamePairError(x)
        for ch in (x, y):
            if ch in self._mapping:
                raise DuplicatePlugError(ch)

        self._mapping[x] = y
        self._mapping[y] = x
        logger.debug("plug_pair_added", pair=x + y)
        return x, y

    def set_pairs(self, plug_pairs: str) -> str:
        """Wire pairs from a flat string such as ``"HWKLAO"`` (H-W, K-L, A-O).

        The call is all-or-nothing: if any pair is rejected, the plugboard
        keeps the wiring it had before the call.

        Raises:
            PairCountError: If the string has an odd length.
            PlugboardError: First pair that cannot be wired.
            InvalidCharacterError: First non-alphabet letter.

        """
        if len(plug_pairs) % 2 != 0:
            raise PairCountError(len(plug_pairs))

        saved = dict(self._mapping)
        try:
            for i in range(0, len(plug_pairs), 2):
                self.add_pair(plug_pairs[i], plug_pairs[i + 1])
        except EnigmaError:
            self._mapping = saved
            raise
        return self.pairs()

    def transform(self, symbol: str) -> str:
        """Return the letter plugged to `symbol`, or `symbol` itself (uppercased)."""
        val = symbol.upper()
        if index_of(symbol) < 0:
            raise InvalidCharacterError(symbol)
        return self._mapping.get(val, val)

    def __repr__(self) -> str:
        shown = " ".join(f"{a}{b}" for a, b in self._mapping.items() if a < b)
        return f"<Plugboard {shown or '-'}>"
