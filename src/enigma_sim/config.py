"""enigma_sim.config.

Machine configuration.

A :class:`MachineConfig` captures everything needed to build a device in a
known starting state: reflector, rotor order, plugboard pairs, rotor positions
and ring offsets. Building the same config twice gives two independent devices
at the same state, which is how a message is decrypted: build a fresh device
and feed it the ciphertext.

Defaults match the classic command-line defaults: reflector B, rotors
I, II, III, empty plugboard, all positions and ring offsets at "A".

"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from .device import Device

logger = structlog.get_logger(__name__)

DEFAULT_REFLECTOR = "B"
DEFAULT_ROTORS: tuple[str, ...] = ("I", "II", "III")


def parse_rotor_list(text: str) -> tuple[str, ...]:
    """Split a comma-separated rotor list such as ``"I, II,III"``.

    Empty items are dropped and names are uppercased.

    """
    return tuple(p.strip().upper() for p in text.split(",") if p.strip() != "")


@dataclass(frozen=True)
class MachineConfig:
    """Static configuration of one device.

    Attributes:
        reflector:
            Reflector model (A, B or C). None or "" installs no reflector.
        rotors:
            Rotor models (I..VIII) in left-to-right installation order.
        plug_pairs:
            Flat plugboard pair string, e.g. "HWKLAO". Empty means no cables.
        segments:
            Starting rotor positions, one letter per rotor. Empty leaves all at A.
        ring_offsets:
            Ring settings, one letter per rotor. Empty leaves all at A.

    """

    reflector: str | None = DEFAULT_REFLECTOR
    rotors: tuple[str, ...] = DEFAULT_ROTORS
    plug_pairs: str = ""
    segments: str = ""
    ring_offsets: str = ""

    @classmethod
    def from_strings(
        cls,
        reflector: str | None = DEFAULT_REFLECTOR,
        rotors: str = ",".join(DEFAULT_ROTORS),
        plug_pairs: str = "",
        segments: str = "",
        ring_offsets: str = "",
    ) -> MachineConfig:
        """Build a config from command-line style strings."""
        return cls(
            reflector=reflector,
            rotors=parse_rotor_list(rotors),
            plug_pairs=plug_pairs.strip(),
            segments=segments.strip(),
            ring_offsets=ring_offsets.strip(),
        )


def build_device(cfg: MachineConfig) -> Device:
    """Create a device and apply `cfg` to it.

    Order: plug pairs, reflector, rotors, segments, ring offsets.

    Raises:
        EnigmaError: The first configuration value that is rejected.

    """
    device = Device()
    device.set_plug_pairs(cfg.plug_pairs)

    if cfg.reflector:
        device.set_reflector_type(cfg.reflector)

    for name in cfg.rotors:
        device.add_rotor_type(name)

    if cfg.segments != "":
        device.set_segments(cfg.segments)
    if cfg.ring_offsets != "":
        device.set_ring_offsets(cfg.ring_offsets)

    logger.debug(
        "device_built",
        reflector=cfg.reflector,
        rotors=",".join(cfg.rotors),
        segments=device.segments(),
        ring_offsets=device.ring_offsets(),
        plugboard=device.plugboard(),
    )
    return device
