# arpsend

Small building blocks for working with ARP over Ethernet.

- `arpsend.mac.Mac` is a six-byte hardware address. It can be built from
  text with any separators, for example `"02:00:00:00:00:01"` or
  `"020000-000001"`. It can also be built from six bytes or from another
  `Mac`, and with no argument it is all zeros. It formats as
  `02:00:00:00:00:01`, and `bytes()` gives its octets. It supports ordering,
  hashing and equality, including equality with raw bytes. It has the checks
  `is_null`, `is_broadcast` and `is_multicast` (`01:00:5E:0x:xx:xx`). The
  class methods `null_mac`, `broadcast_mac` and `random_mac` create
  addresses; `random_mac` clears the top bit of the first octet.
- `arpsend.ip.Ip` is an IPv4 address held as a 32-bit integer. It is built
  from an `int` in the range 0 to 0xFFFFFFFF, from dotted text such as
  `"192.0.2.1"`, or from another `Ip`. `int()`, `str()` and `bytes()` work on
  it, and `bytes()` gives network byte order. It has the checks
  `is_local_host` (127.x.x.x), `is_broadcast` and `is_multicast` (224.0.0.0
  through 239.255.255.255).
- `arpsend.ethhdr.EthHdr` is the 14-byte Ethernet header, with the fields
  `dmac`, `smac` and `ether_type`. `arpsend.ethhdr.EtherType` holds `IP4`,
  `ARP` and `IP6`.
- `arpsend.arphdr.ArpHdr` is the 28-byte ARP header for Ethernet and IPv4. It
  has the fields `op`, `smac`, `sip`, `tmac` and `tip`, plus `hrd`, `pro`,
  `hln` and `pln`. These last four default to Ethernet, IPv4, 6 and 4.
  `arpsend.arphdr.HardwareType` and `arpsend.arphdr.Operation` name the known
  hardware types and operations.

Both header types are frozen dataclasses. `pack()` returns the bytes in
network byte order. The class method `unpack(data)` reads a header from the
start of `data` and raises `ValueError` if `data` is too short. A `Mac` or
`Ip` that is given malformed text raises `ValueError`.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Building and parsing an ARP reply

```python
from arpsend.arphdr import ArpHdr, Operation
from arpsend.ethhdr import EtherType, EthHdr
from arpsend.ip import Ip
from arpsend.mac import Mac

eth = EthHdr(Mac("02:00:00:00:00:02"), Mac("02:00:00:00:00:01"), EtherType.ARP)
arp = ArpHdr(
    op=Operation.REPLY,
    smac=Mac("02:00:00:00:00:01"),
    sip=Ip("192.0.2.1"),
    tmac=Mac("02:00:00:00:00:02"),
    tip=Ip("192.0.2.14"),
)

frame = eth.pack() + arp.pack()
assert len(frame) == 42
assert EthHdr.unpack(frame) == eth
assert ArpHdr.unpack(frame[EthHdr.SIZE:]) == arp
```

## What this package does not do

The package builds and parses frame bytes only. It does not open network
interfaces and does not send or capture packets. It also has no command-line
program. To put a frame on the wire, pass the bytes from `pack()` to a raw
socket or another packet-sending tool of your choice.