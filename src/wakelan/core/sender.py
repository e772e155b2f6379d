"""UDP broadcast of magic packets."""

import logging
import socket

from wakelan.core.packet import MagicPacket

logger = logging.getLogger(__name__)

BROADCAST_ADDRESS = "255.255.255.255"
WOL_PORT = 9


def broadcast(packet: MagicPacket) -> None:
    """
    Send a magic packet as a single UDP datagram to 255.255.255.255:9.

    Fire-and-forget: nothing is awaited and nothing is retried.

    Raises:
        OSError: If binding, enabling broadcast, or sending fails
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("0.0.0.0", 0))
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        sent = sock.sendto(bytes(packet), (BROADCAST_ADDRESS, WOL_PORT))
        logger.debug("Sent %d bytes to %s:%d", sent, BROADCAST_ADDRESS, WOL_PORT)
