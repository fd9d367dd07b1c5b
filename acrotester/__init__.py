"""Packet framing, tester configuration files, site mapping and view helpers."""

__version__ = "0.1.0"