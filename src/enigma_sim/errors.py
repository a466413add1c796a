"""enigma_sim.errors.

Exception hierarchy for **enigma-sim**.

Every failure raised by the machine derives from :class:`EnigmaError`, so the
command-line layer can catch a single type and turn it into an exit code. The
subclasses let library callers react to one kind of failure only (for example,
skip characters that raise :class:`InvalidCharacterError` while still failing
hard on a broken configuration).

"""

from __future__ import annotations


class EnigmaError(Exception):
    """Base class for all enigma-sim errors."""


class InvalidCharacterError(EnigmaError):
    """A symbol outside the machine alphabet reached a transform."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid character: {char!r}")
        self.char = char


class InvalidPositionError(EnigmaError):
    """A rotor segment (position) was set to a non-alphabet symbol."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid segment position: {char!r}")
        self.char = char


class InvalidRingOffsetError(EnigmaError):
    """A ring offset was set to a non-alphabet symbol."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid ring offset: {char!r}")
        self.char = char


class InvalidModelError(EnigmaError):
    """An unknown rotor or reflector model name."""

    kind = "model"

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid {self.kind} type: {name!r}")
        self.name = name


class InvalidRotorTypeError(InvalidModelError):
    kind = "rotor"


class InvalidReflectorTypeError(InvalidModelError):
    kind = "reflector"


class ConfigurationError(EnigmaError):
    """A configuration string has the wrong shape."""


class SegmentCountError(ConfigurationError):
    """Segment or ring-offset string length differs from the rotor count."""

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"invalid count of segments: {actual}/{expected} (actual/expected)"
        )
        self.actual = actual
        self.expected = expected


class PairCountError(ConfigurationError):
    """Plugboard pair string has an odd number of characters."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"count of characters in pair settings should be even, got {length}"
        )
        self.length = length


class PlugboardError(EnigmaError):
    """A plugboard pair cannot be wired."""


class SamePairError(PlugboardError):
    """Both ends of a plug pair are the same letter."""

    def __init__(self, char: str) -> None:
        super().__init__(f"input and output of plug pair can not be same: {char!r}")
        self.char = char


class DuplicatePlugError(PlugboardError):
    """A letter already has a plugboard partner."""

    def __init__(self, char: str) -> None:
        super().__init__(f"plugboard already has a connection for: {char!r}")
        self.char = char


class WiringError(EnigmaError):
    """A custom rotor/reflector table is not a valid wiring."""
