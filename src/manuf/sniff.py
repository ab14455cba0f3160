"""
Live packet capture annotated with manufacturer names.

Every Ethernet frame seen on the interface produces one line::

    aa:bb:cc:dd:ee:ff (Example Corp) -> 11:22:33:44:55:66 (?)

Requires root (or CAP_NET_RAW) for packet capture.
"""
from __future__ import annotations

from typing import Callable, Optional

from scapy.all import Ether, conf, sniff

from .logging import get_logger
from .matcher import Matcher

logger = get_logger(__name__)


def default_interface() -> str:
    """Interface scapy would capture on when none is given."""
    return str(conf.iface)


def describe_frame(packet, matcher: Matcher) -> Optional[str]:
    """Format the Ethernet layer of ``packet``, or None if it has none."""
    if Ether not in packet:
        return None
    eth = packet[Ether]
    return f"{eth.src} ({matcher.lookup(eth.src)}) -> {eth.dst} ({matcher.lookup(eth.dst)})"


def capture(
    matcher: Matcher,
    emit: Callable[[str], None],
    interface: Optional[str] = None,
    count: int = 0,
) -> None:
    """Sniff ``interface`` and call ``emit`` with a line per Ethernet frame.

    Args:
        matcher: Lookup used for source and destination addresses
        emit: Receives each formatted line
        interface: Capture interface (default: scapy's default interface)
        count: Stop after this many packets (0 captures until interrupted)
    """
    iface = interface or default_interface()
    logger.info("Starting capture", interface=iface, records=len(matcher))

    def _on_packet(packet) -> None:
        line = describe_frame(packet, matcher)
        if line is not None:
            emit(line)

    sniff(iface=iface, prn=_on_packet, store=False, count=count)


__all__ = ["capture", "default_interface", "describe_frame"]
