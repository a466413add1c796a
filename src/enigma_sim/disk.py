"""enigma_sim.disk.

Wired disks: rotors and reflectors.

Both kinds of disk share the same signal-path arithmetic. A signal entering at
alphabet index ``s`` is shifted by the disk's *correction* (current position
minus ring offset), passed through the wiring, and shifted back:

    entry  = (s + correction) mod 26
    mid    = wiring[entry]                  # forward
    mid    = wiring.index(ALPHABET[entry])  # backward
    output = (index(mid) - correction) mod 26

A :class:`Rotor` has a movable position, a ring offset and notches. A
:class:`Reflector` is the degenerate case: correction is always zero, it never
steps, and its backward path is its forward path.

"""

from __future__ import annotations

from .errors import (
    InvalidCharacterError,
    InvalidPositionError,
    InvalidReflectorTypeError,
    InvalidRingOffsetError,
    InvalidRotorTypeError,
    WiringError,
)
from .tables import ALPHABET, REFLECTOR_MODELS, ROTOR_MODELS, SIZE, index_of


def check_wiring(wiring: str) -> str:
    """Validate a wiring table and return it uppercased.

    Args:
        wiring: 26 letters, each alphabet letter exactly once.

    Returns:
        The uppercased wiring string.

    Raises:
        WiringError: If the length is wrong, a character is not ASCII or a
            letter is missing.

    """
    if not wiring.isascii():
        raise WiringError(f"wiring contains non-ASCII characters: {wiring!r}")
    w = wiring.upper()
    if len(w) != SIZE:
        raise WiringError(f"invalid ring size: {len(w)}/{SIZE} (actual/expected)")
    for ch in ALPHABET:
        if ch not in w:
            raise WiringError(f"missed ring segment: {ch}")
    return w


class WiredDisk:
    """Common signal path of rotors and reflectors."""

    def __init__(self, wiring: str) -> None:
        self.wiring = check_wiring(wiring)
        self._inverse = [self.wiring.index(ch) for ch in ALPHABET]

    @property
    def correction(self) -> int:
        return 0

    def _signal(self, symbol: str, inverse: bool) -> str:
        s = index_of(symbol)
        if s < 0:
            raise InvalidCharacterError(symbol)

        c = self.correction
        entry = (s + c) % SIZE
        if inverse:
            mid = self._inverse[entry]
        else:
            mid = ALPHABET.index(self.wiring[entry])
        return ALPHABET[(mid - c) % SIZE]

    def forward(self, symbol: str) -> str:
        """Pass `symbol` from the plain (right) side to the wired (left) side."""
        return self._signal(symbol, inverse=False)

    def backward(self, symbol: str) -> str:
        """Pass `symbol` from the wired (left) side back to the plain side."""
        return self._signal(symbol, inverse=True)


class Rotor(WiredDisk):
    """A rotating wired disk with a ring setting and turnover notches.

    Attributes:
        wiring: Uppercased permutation of the alphabet.
        notches: Letters at which this rotor turns over its left neighbour.
        position: Current angular position (0..25), shown as :attr:`segment`.
        offset: Ring setting (0..25), shown as :attr:`ring_offset`.

    Position and offset are read-only; they change through
    :meth:`set_segment`, :meth:`set_ring_offset` and :meth:`advance`.

    """

    def __init__(self, wiring: str, notches: str = "") -> None:
        super().__init__(wiring)
        for ch in notches:
            if index_of(ch) < 0:
                raise WiringError(f"invalid notch: {ch!r}")
        self.notches = frozenset(notches.upper())
        self._position = 0
        self._offset = 0

    @classmethod
    def model(cls, name: str) -> Rotor:
        """Build one of the historical rotors I..VIII (case-insensitive)."""
        key = name.strip().upper()
        try:
            wiring, notches = ROTOR_MODELS[key]
        except KeyError as exc:
            raise InvalidRotorTypeError(name) from exc
        return cls(wiring, notches)

    @property
    def position(self) -> int:
        return self._position

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def correction(self) -> int:
        return self._position - self._offset

    @property
    def segment(self) -> str:
        return ALPHABET[self._position]

    def set_segment(self, symbol: str) -> str:
        pos = index_of(symbol)
        if pos < 0:
            raise InvalidPositionError(symbol)
        self._position = pos
        return self.segment

    @property
    def ring_offset(self) -> str:
        return ALPHABET[self._offset]

    def set_ring_offset(self, symbol: str) -> str:
        off = index_of(symbol)
        if off < 0:
            raise InvalidRingOffsetError(symbol)
        self._offset = off
        return self.ring_offset

    def at_notch(self) -> bool:
        return self.segment in self.notches

    def advance(self) -> bool:
        """Step one position.

        Returns:
            True if the rotor sat at a notch *before* stepping, i.e. the
            rotor to its left has to turn over as well.

        """
        turnover = self.at_notch()
        self._position = (self._position + 1) % SIZE
        return turnover

    def __repr__(self) -> str:
        return (
            f"<Rotor segment={self.segment} ring={self.ring_offset} "
            f"notches={''.join(sorted(self.notches))}>"
        )


class Reflector(WiredDisk):
    """A static disk that sends the signal back through the rotors."""

    def __init__(self, wiring: str) -> None:
        super().__init__(wiring)
        for i, ch in enumerate(self.wiring):
            if self.wiring[ALPHABET.index(ch)] != ALPHABET[i]:
                raise WiringError(f"reflector wiring is not an involution at {ALPHABET[i]}")

    @classmethod
    def model(cls, name: str) -> Reflector:
        """Build one of the historical reflectors A, B or C (case-insensitive)."""
        key = name.strip().upper()
        try:
            wiring = REFLECTOR_MODELS[key]
        except KeyError as exc:
            raise InvalidReflectorTypeError(name) from exc
        return cls(wiring)

    def backward(self, symbol: str) -> str:
        return self.forward(symbol)

    def __repr__(self) -> str:
        return f"<Reflector wiring={self.wiring}>"
