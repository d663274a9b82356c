import pytest

from arpsend.arphdr import ArpHdr, HardwareType, Operation
from arpsend.ethhdr import EtherType
from arpsend.ip import Ip
from arpsend.mac import Mac


def _header(op=Operation.REPLY):
    return ArpHdr(
        op=op,
        smac=Mac("001122-334455"),
        sip=Ip("172.20.10.1"),
        tmac=Mac("001122-334456"),
        tip=Ip("172.20.10.14"),
    )


def test_defaults():
    header = _header()
    assert header.hrd == HardwareType.ETHER
    assert header.pro == EtherType.IP4
    assert header.hln == Mac.SIZE
    assert header.pln == Ip.SIZE


def test_pack_size():
    assert len(_header().pack()) == ArpHdr.SIZE == 28


def test_pack_layout():
    header = _header()
    data = header.pack()
    assert data[:8] == b"\x00\x01\x08\x00\x06\x04\x00\x02"
    assert data[8:14] == bytes(header.smac)
    assert data[14:18] == bytes(header.sip)
    assert data[18:24] == bytes(header.tmac)
    assert data[24:28] == bytes(header.tip)


@pytest.mark.parametrize("op", list(Operation))
def test_round_trip(op):
    header = _header(op)
    assert ArpHdr.unpack(header.pack()) == header


def test_unpacked_types():
    header = ArpHdr.unpack(_header().pack())
    assert header.op is Operation.REPLY
    assert header.hrd is HardwareType.ETHER
    assert str(header.sip) == "172.20.10.1"


def test_strings_accepted():
    header = ArpHdr(Operation.REQUEST, "00:11:22:33:44:55", "172.20.10.1",
                    "00:11:22:33:44:56", "172.20.10.14")
    assert header.tip == Ip("172.20.10.14")


def test_unpack_short():
    with pytest.raises(ValueError):
        ArpHdr.unpack(b"\x00" * 27)


def test_op_out_of_range():
    with pytest.raises(ValueError):
        _header(op=0x10000)