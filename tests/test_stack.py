import pytest

from enigma_sim.disk import Reflector, Rotor
from enigma_sim.errors import (
    InvalidCharacterError,
    InvalidPositionError,
    InvalidRingOffsetError,
    SegmentCountError,
)
from enigma_sim.stack import RotorStack


def make_stack(*rotors: str, reflector: str | None = "B") -> RotorStack:
    stack = RotorStack()
    if reflector is not None:
        stack.set_reflector(Reflector.model(reflector))
    for name in rotors:
        stack.add_rotor(Rotor.model(name))
    return stack


def test_set_segments() -> None:
    stack = make_stack("I", "II", "III")
    assert stack.segments() == "AAA"
    assert stack.set_segments("BhR") == "BHR"
    assert stack.segments() == "BHR"


def test_set_segments_count_mismatch() -> None:
    stack = make_stack("I", "II", "III")
    with pytest.raises(SegmentCountError):
        stack.set_segments("AAAA")
    with pytest.raises(SegmentCountError):
        stack.set_segments("AA")


def test_set_segments_invalid_letter_is_atomic() -> None:
    stack = make_stack("I", "II", "III")
    stack.set_segments("XYZ")
    with pytest.raises(InvalidPositionError):
        stack.set_segments("AA;")
    assert stack.segments() == "XYZ"


def test_set_ring_offsets() -> None:
    stack = make_stack("I", "II", "III")
    assert stack.set_ring_offsets("iup") == "IUP"
    assert stack.ring_offsets() == "IUP"
    with pytest.raises(SegmentCountError):
        stack.set_ring_offsets("I")
    with pytest.raises(InvalidRingOffsetError):
        stack.set_ring_offsets("A1B")
    assert stack.ring_offsets() == "IUP"


def test_double_step() -> None:
    stack = make_stack("I", "II", "III")
    stack.set_segments("ADU")
    seen = []
    for _ in range(4):
        stack.advance()
        seen.append(stack.segments())
    assert seen == ["ADV", "AEW", "BFX", "BFY"]


def test_turnover_chain_through_all_rotors() -> None:
    stack = make_stack("I", "II", "III")
    stack.set_segments("QEV")
    stack.advance()
    assert stack.segments() == "RFW"


def test_single_rotor_steps_alone() -> None:
    stack = make_stack("I")
    stack.set_segments("Z")
    stack.advance()
    assert stack.segments() == "A"


def test_advance_without_rotors_is_noop() -> None:
    stack = RotorStack()
    stack.advance()
    assert stack.segments() == ""
    assert stack.set_segments("") == ""


def test_encode() -> None:
    stack = make_stack("I", "II", "III")
    stack.set_segments("PDU")
    assert "".join(stack.encode(ch) for ch in "HelloWorld") == "MPVJAELATQ"


def test_encode_is_self_inverse() -> None:
    first = make_stack("IV", "V", "VI")
    second = make_stack("IV", "V", "VI")
    first.set_segments("KCZ")
    second.set_segments("KCZ")
    for ch in "ENIGMAMACHINE":
        assert second.encode(first.encode(ch)) == ch


def test_encode_without_reflector_returns_forward_pass() -> None:
    stack = make_stack("I", reflector=None)
    stack.set_segments("Z")
    # after stepping to A, rotor I maps A to E
    assert stack.encode("A") == "E"


def test_encode_rejects_non_letters() -> None:
    stack = make_stack("I", "II", "III")
    with pytest.raises(InvalidCharacterError):
        stack.encode("!")
