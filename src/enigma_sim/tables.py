"""enigma_sim.tables.

Historical wiring and notch tables.

Each wiring string lists, for contact ``i`` on the entry side, the letter it is
wired to on the other side. Reflector tables are involutions. The tables are
validated when a :class:`~enigma_sim.disk.Rotor` or
:class:`~enigma_sim.disk.Reflector` is built from them, never mutated.

"""

from __future__ import annotations

from typing import Final

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE: Final[int] = len(ALPHABET)

# Rotor name -> (wiring, notches).
ROTOR_MODELS: Final[dict[str, tuple[str, str]]] = {
    "I": ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II": ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV": ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V": ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI": ("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII": ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII": ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
}

REFLECTOR_MODELS: Final[dict[str, str]] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}


def index_of(char: str) -> int:
    """Return the alphabet position of `char` (case-insensitive), or -1."""
    if len(char) != 1 or not char.isascii():
        return -1
    return ALPHABET.find(char.upper())
