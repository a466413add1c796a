import pytest

from enigma_sim.disk import Rotor
from enigma_sim.errors import (
    InvalidCharacterError,
    InvalidPositionError,
    InvalidRingOffsetError,
    InvalidRotorTypeError,
    WiringError,
)
from enigma_sim.tables import ALPHABET, ROTOR_MODELS


def test_all_models_build() -> None:
    for name in ROTOR_MODELS:
        rotor = Rotor.model(name)
        assert rotor.segment == "A"
        assert rotor.ring_offset == "A"
    assert Rotor.model("viii").notches == frozenset("ZM")


def test_unknown_model() -> None:
    with pytest.raises(InvalidRotorTypeError):
        Rotor.model("IX")


def test_set_segment() -> None:
    rotor = Rotor.model("I")
    assert rotor.set_segment("B") == "B"
    assert rotor.set_segment("b") == "B"
    assert rotor.segment == "B"
    with pytest.raises(InvalidPositionError):
        rotor.set_segment(",")
    assert rotor.segment == "B"


def test_set_ring_offset() -> None:
    for offset in ALPHABET:
        assert Rotor.model("I").set_ring_offset(offset) == offset
    with pytest.raises(InvalidRingOffsetError):
        Rotor.model("I").set_ring_offset(":")


def test_forward_known_values() -> None:
    rotor = Rotor.model("I")
    assert rotor.forward("A") == "E"
    assert rotor.backward("E") == "A"
    rotor.set_segment("B")
    # position B: A enters at contact B, wired to K, shifted back to J
    assert rotor.forward("A") == "J"


def test_forward_rejects_non_letters() -> None:
    with pytest.raises(InvalidCharacterError):
        Rotor.model("I").forward(".")
    with pytest.raises(InvalidCharacterError):
        Rotor.model("I").backward("AB")


def test_forward_backward_inverse_at_every_setting() -> None:
    for name in ROTOR_MODELS:
        rotor = Rotor.model(name)
        for offset in ALPHABET:
            rotor.set_ring_offset(offset)
            for _ in range(len(ALPHABET)):
                rotor.advance()
                for ch in ALPHABET:
                    for x in (ch, ch.lower()):
                        assert rotor.backward(rotor.forward(x)) == ch
                        assert rotor.forward(rotor.backward(x)) == ch


def test_advancing_position_matches_decrementing_offset() -> None:
    for name in ROTOR_MODELS:
        for k in range(len(ALPHABET)):
            moved = Rotor.model(name)
            ringed = Rotor.model(name)
            for _ in range(k):
                moved.advance()
            ringed.set_ring_offset(ALPHABET[-k % len(ALPHABET)])
            assert moved.position == k
            assert ringed.position == 0
            for ch in ALPHABET:
                assert moved.forward(ch) == ringed.forward(ch)
                assert moved.backward(ch) == ringed.backward(ch)


def test_advance_reports_notch_before_moving() -> None:
    rotor = Rotor.model("I")
    rotor.set_segment("P")
    assert rotor.advance() is False
    assert rotor.at_notch()
    assert rotor.advance() is True
    assert rotor.segment == "R"


def test_advance_wraps() -> None:
    rotor = Rotor.model("V")
    rotor.set_segment("Z")
    assert rotor.advance() is True
    assert rotor.segment == "A"


def test_custom_wiring_validation() -> None:
    Rotor("bdfhjlcprtxvznyeiwgakmusqo", "v")
    with pytest.raises(WiringError):
        Rotor("ABC")
    with pytest.raises(WiringError):
        Rotor("AACDEFGHIJKLMNOPQRSTUVWXYZ")
    with pytest.raises(WiringError):
        Rotor(ALPHABET, "Q1")


def test_non_ascii_letters_are_rejected() -> None:
    # "ı".upper() == "I" must not sneak into the alphabet
    with pytest.raises(WiringError):
        Rotor(ROTOR_MODELS["I"][0], "ı")
    with pytest.raises(WiringError):
        Rotor("ı" + ROTOR_MODELS["I"][0][1:].replace("I", "E"))
    with pytest.raises(InvalidPositionError):
        Rotor.model("I").set_segment("ı")


def test_position_and_offset_are_read_only() -> None:
    rotor = Rotor.model("II")
    with pytest.raises(AttributeError):
        rotor.position = 30
    with pytest.raises(AttributeError):
        rotor.offset = -1
    rotor.set_ring_offset("C")
    assert rotor.offset == 2
