"""enigma_sim.device.

The complete machine: plugboard, rotor stack and reflector.

Configuration calls delegate to :class:`~enigma_sim.plugboard.Plugboard` and
:class:`~enigma_sim.stack.RotorStack`. :meth:`Device.crypt` transforms one
character; because plugboard and rotor path are both self-inverse for a fixed
rotor state, running the ciphertext through a device configured the same way
gives back the plaintext.

"""

from __future__ import annotations

from .disk import Reflector, Rotor
from .errors import InvalidCharacterError
from .plugboard import Plugboard
from .stack import RotorStack
from .tables import index_of


class Device:
    """An Enigma machine with a single static configuration."""

    def __init__(self) -> None:
        self.board = Plugboard()
        self.block = RotorStack()

    # reflector is always leftmost
    def set_reflector(self, reflector: Reflector) -> None:
        self.block.set_reflector(reflector)

    def set_reflector_type(self, reflector_type: str) -> None:
        self.block.set_reflector(Reflector.model(reflector_type))

    # rotors are added left to right
    def add_rotor(self, rotor: Rotor) -> None:
        self.block.add_rotor(rotor)

    def add_rotor_type(self, rotor_type: str) -> None:
        self.block.add_rotor(Rotor.model(rotor_type))

    def segments(self) -> str:
        return self.block.segments()

    def set_segments(self, segments: str) -> str:
        return self.block.set_segments(segments)

    def ring_offsets(self) -> str:
        return self.block.ring_offsets()

    def set_ring_offsets(self, offsets: str) -> str:
        return self.block.set_ring_offsets(offsets)

    def plugboard(self) -> str:
        return self.board.pairs()

    def add_plug_pair(self, a: str, b: str) -> tuple[str, str]:
        return self.board.add_pair(a, b)

    def set_plug_pairs(self, plug_pairs: str) -> str:
        return self.board.set_pairs(plug_pairs)

    def crypt(self, ch: str) -> str:
        """Encrypt (or decrypt) a single character.

        Args:
            ch: One letter, either case.

        Returns:
            The uppercase output letter.

        Raises:
            InvalidCharacterError: If `ch` is not a letter of the alphabet.
                The rotors do not move in that case.

        """
        if index_of(ch) < 0:
            raise InvalidCharacterError(ch)

        val = self.board.transform(ch.upper())
        val = self.block.encode(val)
        return self.board.transform(val)

    def __repr__(self) -> str:
        return f"<Device {self.block!r} {self.board!r}>"
