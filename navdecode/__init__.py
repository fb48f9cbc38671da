"""Decoders for GNSS/INS binary navigation packets and navigation math helpers."""

__version__ = "0.1.0"

__all__ = [
    "nav_message",
    "navmath",
    "packet",
    "raw_gnss",
    "sensors",
    "system_state",
]