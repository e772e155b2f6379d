"""Wake-on-LAN functionality."""

import logging

from wakelan.core.packet import create_magic_packet
from wakelan.core.sender import BROADCAST_ADDRESS, WOL_PORT, broadcast

logger = logging.getLogger(__name__)


def wake(mac_address: str) -> bool:
    """
    Send a Wake-on-LAN magic packet to wake a remote machine.

    Args:
        mac_address: MAC address of the target machine (e.g., "AA:BB:CC:DD:EE:FF")

    Returns:
        True if packet was sent successfully

    Raises:
        ParseError: If the MAC address is malformed
        OSError: If the broadcast could not be sent
    """
    packet = create_magic_packet(mac_address)
    logger.info(
        "Sending WOL magic packet to %s via %s:%d", mac_address, BROADCAST_ADDRESS, WOL_PORT
    )
    broadcast(packet)
    logger.debug("WOL packet sent successfully")
    return True
