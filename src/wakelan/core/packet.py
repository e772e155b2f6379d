"""Magic packet construction.

A magic packet is six 0xFF bytes followed by sixteen copies of the target's
MAC address, 102 bytes in total.
"""

from dataclasses import dataclass

from wakelan.core.address import parse_eui48

MAC_LEN = 6
MAC_REPEAT = 16
MAGIC_PACKET_LEN = MAC_LEN * (MAC_REPEAT + 1)


@dataclass(frozen=True)
class MagicPacket:
    """An immutable, fully built magic packet."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != MAGIC_PACKET_LEN:
            raise ValueError(
                f"magic packet must be {MAGIC_PACKET_LEN} bytes, got {len(self.data)}"
            )

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


def build_magic_packet(mac: int) -> MagicPacket:
    """
    Build the magic packet for a parsed 48-bit MAC address.

    Args:
        mac: Address as returned by ``parse_eui48``

    Returns:
        MagicPacket with the 0xFF lead-in and 16 big-endian MAC copies
    """
    packet = bytearray(b"\xff" * MAGIC_PACKET_LEN)

    # slot 0 is the lead-in and stays 0xFF
    for slot in range(1, MAC_REPEAT + 1):
        dst = slot * MAC_LEN
        for j in range(MAC_LEN):
            packet[dst + j] = (mac >> (40 - j * 8)) & 0xFF

    return MagicPacket(bytes(packet))


def create_magic_packet(mac_address: str) -> MagicPacket:
    """Parse ``mac_address`` and build its magic packet. Raises ParseError."""
    return build_magic_packet(parse_eui48(mac_address))
