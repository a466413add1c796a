"""enigma_sim.stack.

The rotor stack (the "Walzen" block): rotors installed left to right, plus an
optional reflector that is always logically leftmost.

Stepping happens once per key press, *before* the signal passes through. The
rightmost rotor is the fastest. Two cases are distinguished:

1) **Turnover**: the fastest rotor sits at a notch. Rotors advance from right
   to left; the chain stops at the first rotor that was not at a notch.
2) **Plain step**: the fastest rotor advances alone, unless its left neighbour
   sits at a notch. In that case the neighbour advances as well (the
   *double step*) and the chain continues leftwards with the same stop rule.

Example (rotors I, II, III at "ADU"): ADV, AEW, BFX, BFY.

"""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from .disk import Reflector, Rotor
from .errors import InvalidPositionError, InvalidRingOffsetError, SegmentCountError
from .tables import index_of

logger = structlog.get_logger(__name__)


def _turnover(chain: Iterator[Rotor]) -> None:
    for rotor in chain:
        if not rotor.advance():
            break


class RotorStack:
    """Ordered rotors (left to right) and an optional reflector."""

    def __init__(self) -> None:
        self.rotors: list[Rotor] = []
        self.reflector: Reflector | None = None

    def set_reflector(self, reflector: Reflector) -> None:
        self.reflector = reflector
        logger.debug("reflector_set", wiring=reflector.wiring)

    def add_rotor(self, rotor: Rotor) -> None:
        """Install `rotor` to the right of the rotors already present."""
        self.rotors.append(rotor)
        logger.debug("rotor_added", wiring=rotor.wiring, count=len(self.rotors))

    def advance(self) -> None:
        if not self.rotors:
            return

        chain = reversed(self.rotors)
        fastest = next(chain)

        if fastest.at_notch():
            fastest.advance()
            _turnover(chain)
            return

        fastest.advance()
        middle = next(chain, None)
        if middle is None or not middle.at_notch():
            return

        # double step
        middle.advance()
        _turnover(chain)

    def encode(self, symbol: str) -> str:
        """Step the rotors, then send `symbol` through the stack and back."""
        self.advance()

        val = symbol
        for rotor in reversed(self.rotors):
            val = rotor.forward(val)

        if self.reflector is None:
            return val
        val = self.reflector.forward(val)

        for rotor in self.rotors:
            val = rotor.backward(val)
        return val

    def _check_count(self, values: str) -> None:
        if len(values) != len(self.rotors):
            raise SegmentCountError(len(values), len(self.rotors))

    def segments(self) -> str:
        return "".join(r.segment for r in self.rotors)

    def set_segments(self, segments: str) -> str:
        """Set every rotor position, left to right, e.g. ``"PDU"``.

        All letters are checked before any rotor moves, so a failing call
        leaves the positions untouched.

        Raises:
            SegmentCountError: If the length differs from the rotor count.
            InvalidPositionError: First letter outside the alphabet.

        """
        self._check_count(segments)
        for ch in segments:
            if index_of(ch) < 0:
                raise InvalidPositionError(ch)

        for rotor, ch in zip(self.rotors, segments):
            rotor.set_segment(ch)
        logger.debug("segments_set", segments=self.segments())
        return self.segments()

    def ring_offsets(self) -> str:
        return "".join(r.ring_offset for r in self.rotors)

    def set_ring_offsets(self, offsets: str) -> str:
        """Set every ring offset, left to right; same contract as `set_segments`."""
        self._check_count(offsets)
        for ch in offsets:
            if index_of(ch) < 0:
                raise InvalidRingOffsetError(ch)

        for rotor, ch in zip(self.rotors, offsets):
            rotor.set_ring_offset(ch)
        logger.debug("ring_offsets_set", ring_offsets=self.ring_offsets())
        return self.ring_offsets()

    def __len__(self) -> int:
        return len(self.rotors)

    def __repr__(self) -> str:
        shown = self.segments() or "-"
        return f"<RotorStack segments={shown} reflector={self.reflector is not None}>"
