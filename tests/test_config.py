import pytest

from enigma_sim.config import MachineConfig, build_device, parse_rotor_list
from enigma_sim.errors import InvalidRotorTypeError, SegmentCountError


def test_defaults() -> None:
    cfg = MachineConfig()
    device = build_device(cfg)
    assert cfg.reflector == "B"
    assert cfg.rotors == ("I", "II", "III")
    assert device.segments() == "AAA"
    assert device.ring_offsets() == "AAA"
    assert device.plugboard() == ""


def test_parse_rotor_list() -> None:
    assert parse_rotor_list("I,II,III") == ("I", "II", "III")
    assert parse_rotor_list(" iv , v,,vi ") == ("IV", "V", "VI")
    assert parse_rotor_list("") == ()


def test_from_strings() -> None:
    cfg = MachineConfig.from_strings(
        reflector="C", rotors="II,IV", plug_pairs="AB", segments="QZ", ring_offsets="BB"
    )
    assert cfg == MachineConfig(
        reflector="C", rotors=("II", "IV"), plug_pairs="AB", segments="QZ", ring_offsets="BB"
    )
    device = build_device(cfg)
    assert device.segments() == "QZ"
    assert device.ring_offsets() == "BB"
    assert device.plugboard() == "AB"


def test_build_gives_fresh_devices() -> None:
    cfg = MachineConfig(segments="PDU")
    first = build_device(cfg)
    first.crypt("A")
    assert first.segments() == "PDV"
    assert build_device(cfg).segments() == "PDU"


def test_no_reflector() -> None:
    device = build_device(MachineConfig(reflector=None, rotors=("I",), segments="Z"))
    assert device.block.reflector is None
    assert device.crypt("A") == "E"


def test_build_errors() -> None:
    with pytest.raises(InvalidRotorTypeError):
        build_device(MachineConfig(rotors=("I", "XI")))
    with pytest.raises(SegmentCountError):
        build_device(MachineConfig(segments="AAAA"))
