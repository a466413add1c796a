"""enigma-sim: an Enigma rotor cipher machine simulator."""

from __future__ import annotations

from .config import MachineConfig, build_device
from .device import Device
from .disk import Reflector, Rotor
from .errors import EnigmaError
from .plugboard import Plugboard
from .stack import RotorStack

__version__ = "0.1.0"

__all__ = [
    "Device",
    "EnigmaError",
    "MachineConfig",
    "Plugboard",
    "Reflector",
    "Rotor",
    "RotorStack",
    "build_device",
]
