import pytest

from arpsend.mac import Mac

TEMP = bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0x55])


def test_ctor_from_bytes_and_string_agree():
    mac3 = Mac(TEMP)
    assert mac3 == Mac("001122-334455")
    assert Mac(mac3) == mac3


def test_default_is_null():
    assert Mac().is_null()


def test_bytes_cast():
    mac = Mac("001122-334455")
    assert bytes(mac) == TEMP


def test_string_cast():
    assert str(Mac("001122-334455")) == "00:11:22:33:44:55"


def test_funcs():
    assert Mac.null_mac().is_null()
    assert Mac("FF:FF:FF:FF:FF:FF").is_broadcast()
    assert Mac("01:00:5E:00:11:22").is_multicast()
    assert not Mac("01:00:5E:80:11:22").is_multicast()
    assert not Mac("001122-334455").is_broadcast()


def test_ordering_like_map():
    m = {
        Mac("001122-334457"): 3,
        Mac("001122-334455"): 1,
        Mac("001122-334456"): 2,
    }
    assert len(m) == 3
    assert [m[key] for key in sorted(m)] == [1, 2, 3]


def test_hash_matches_equality():
    assert len({Mac("001122-334455"), Mac(TEMP), Mac("00:11:22:33:44:55")}) == 1


def test_equal_to_raw_bytes():
    assert Mac("001122-334455") == TEMP


def test_lowercase_string_round_trip():
    mac = Mac("00:ad:00:0f:aa:bb")
    assert Mac(str(mac)) == mac


def test_random_mac():
    for _ in range(20):
        mac = Mac.random_mac()
        assert len(bytes(mac)) == Mac.SIZE
        assert bytes(mac)[0] & 0x80 == 0
        assert Mac(str(mac)) == mac


@pytest.mark.parametrize("text", ["", "0011", "00:11:22:33:44", "zz:zz"])
def test_invalid_string(text):
    with pytest.raises(ValueError):
        Mac(text)


def test_wrong_length_bytes():
    with pytest.raises(ValueError):
        Mac(b"\x00\x11")


def test_wrong_type():
    with pytest.raises(TypeError):
        Mac(12)