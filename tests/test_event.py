import pytest

from sharemouse.event import (
    Button,
    Click,
    DecodeError,
    Move,
    Release,
    Scroll,
    decode,
    encode,
)

ALL_EVENTS = [
    Move(12.5, -3.25),
    Move(0.0, 0.0),
    Click(Button.LEFT),
    Click(Button.RIGHT),
    Click(Button.MIDDLE),
    Release(Button.LEFT),
    Release(Button.RIGHT),
    Release(Button.MIDDLE),
    Scroll(3, -7),
    Scroll(-(2**63), 2**63 - 1),
]


@pytest.mark.parametrize("event", ALL_EVENTS)
def test_round_trip(event):
    assert decode(encode(event)) == event


def test_variant_tags_are_distinct_and_ordered():
    tags = [encode(e)[:4] for e in ALL_EVENTS[1:9]]
    values = [int.from_bytes(t, "little") for t in tags]
    assert values == list(range(8))


def test_left_click_wire_bytes():
    assert encode(Click(Button.LEFT)) == b"\x01\x00\x00\x00"


def test_move_wire_bytes():
    expected = b"\x00\x00\x00\x00" + b"\x00" * 6 + b"\xf0\x3f" + b"\x00" * 7 + b"\x40"
    assert encode(Move(1.0, 2.0)) == expected


def test_scroll_wire_bytes():
    expected = b"\x07\x00\x00\x00" + b"\x01" + b"\x00" * 7 + b"\xff" * 8
    assert encode(Scroll(1, -1)) == expected


def test_click_has_no_payload():
    assert len(encode(Release(Button.MIDDLE))) == len(encode(Click(Button.LEFT)))


def test_trailing_bytes_ignored():
    event = Scroll(5, 6)
    assert decode(encode(event) + b"extra") == event


def test_empty_input_raises():
    with pytest.raises(DecodeError):
        decode(b"")


def test_unknown_variant_raises():
    with pytest.raises(DecodeError, match="variant"):
        decode(b"\x08\x00\x00\x00")


def test_truncated_move_raises():
    with pytest.raises(DecodeError, match="Move"):
        decode(encode(Move(1.0, 2.0))[:-1])


def test_truncated_scroll_raises():
    with pytest.raises(DecodeError, match="Scroll"):
        decode(encode(Scroll(1, 2))[:10])


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        decode(b"\x01")


def test_scroll_out_of_range_raises():
    with pytest.raises(ValueError):
        encode(Scroll(2**63, 0))


def test_encode_rejects_non_event():
    with pytest.raises(TypeError):
        encode("click")