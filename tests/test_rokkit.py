import pytest
from hypothesis import given
from hypothesis import strategies as st

from paxkit.rokkit import rokkit


def test_empty_input_hashes_to_zero():
    assert rokkit(b"") == 0


def test_str_is_rejected():
    with pytest.raises(TypeError):
        rokkit("abc")


@given(st.binary(max_size=64))
def test_result_is_unsigned_32_bit(data):
    assert 0 <= rokkit(data) <= 0xFFFFFFFF


@given(st.binary(max_size=64))
def test_bytes_like_inputs_agree(data):
    expected = rokkit(data)
    assert rokkit(bytearray(data)) == expected
    assert rokkit(memoryview(data)) == expected


@given(st.binary(min_size=1, max_size=64))
def test_non_empty_input_of_any_tail_length_is_hashed(data):
    # every remainder branch (0..3 trailing bytes) yields a 32-bit value
    assert rokkit(data) >> 32 == 0


def test_single_bytes_hash_distinctly():
    hashes = {rokkit(bytes([b])) for b in range(256)}
    assert len(hashes) == 256


def test_mac_like_inputs_hash_distinctly():
    macs = [bytes([0x02, 0x00, 0x00, 0x00, 0x00, n]) for n in range(64)]
    assert len({rokkit(m) for m in macs}) == len(macs)