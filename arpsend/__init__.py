"""MAC and IPv4 address types with Ethernet and ARP header packing and parsing."""

__version__ = "0.1.0"

__all__ = ["arphdr", "ethhdr", "ip", "mac"]