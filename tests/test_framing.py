import pytest

from acrotester.framing import (
    HEADER_LENGTH,
    FrameDecoder,
    ProtocolError,
    encode_packet,
)


def test_header_starts_with_magic_and_version():
    packet = encode_packet(b"{}")
    assert packet[:4] == b"APRO"
    assert packet[4:6] == (1).to_bytes(2, "big")


def test_header_length_field_and_reserved_bytes():
    payload = b'{"method":"Ping"}'
    packet = encode_packet(payload)
    assert len(packet) == HEADER_LENGTH + len(payload)
    assert packet[6:10] == len(payload).to_bytes(4, "big")
    assert packet[10:HEADER_LENGTH] == bytes(HEADER_LENGTH - 10)
    assert packet[HEADER_LENGTH:] == payload


def test_round_trip():
    payload = b'{"jsonrpc":"2.0","id":7}'
    assert FrameDecoder().feed(encode_packet(payload)) == [payload]


def test_empty_payload_round_trip():
    assert FrameDecoder().feed(encode_packet(b"")) == [b""]


def test_byte_by_byte_feed():
    payload = b'{"a":1}'
    packet = encode_packet(payload)
    decoder = FrameDecoder()
    results = [decoder.feed(packet[i : i + 1]) for i in range(len(packet))]
    assert all(r == [] for r in results[:-1])
    assert results[-1] == [payload]
    assert len(decoder) == 0


def test_several_packets_in_one_feed():
    first, second = b'{"n":1}', b'{"n":2}'
    decoder = FrameDecoder()
    assert decoder.feed(encode_packet(first) + encode_packet(second)) == [first, second]


def test_partial_second_packet_stays_buffered():
    first, second = b"one", b"two"
    packet2 = encode_packet(second)
    decoder = FrameDecoder()
    assert decoder.feed(encode_packet(first) + packet2[:5]) == [first]
    assert len(decoder) == 5
    assert decoder.feed(packet2[5:]) == [second]


def test_bad_magic_raises_and_clears():
    decoder = FrameDecoder()
    bad = b"XXXX" + encode_packet(b"x")[4:]
    with pytest.raises(ProtocolError, match="Invalid magic number"):
        decoder.feed(bad)
    assert len(decoder) == 0
    assert decoder.feed(encode_packet(b"ok")) == [b"ok"]


def test_bad_version_raises():
    packet = bytearray(encode_packet(b"x"))
    packet[4:6] = (2).to_bytes(2, "big")
    with pytest.raises(ProtocolError) as info:
        FrameDecoder().feed(bytes(packet))
    assert str(info.value) == "Unsupported header version: 2"


def test_error_carries_earlier_payloads():
    good = encode_packet(b"good")
    bad = b"ZZZZ" + bytes(HEADER_LENGTH - 4)
    with pytest.raises(ProtocolError) as info:
        FrameDecoder().feed(good + bad)
    assert info.value.payloads == (b"good",)


def test_clear_drops_partial_data():
    packet = encode_packet(b"payload")
    decoder = FrameDecoder()
    decoder.feed(packet[:10])
    decoder.clear()
    assert len(decoder) == 0
    assert decoder.feed(packet) == [b"payload"]