"""Network helper for the startup banner in ``assistant.main``."""
import socket


def get_local_ip() -> str:
    """LAN address the OS would route outbound traffic from, or '127.0.0.1'.

    Connecting a UDP socket only selects a route; no packet is sent.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        try:
            s.connect(("192.0.2.1", 80))
            return str(s.getsockname()[0])
        except OSError:
            return "127.0.0.1"
