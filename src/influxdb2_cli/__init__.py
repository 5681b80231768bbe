"""Typed async client and CLI for the InfluxDB 2.x HTTP API."""

__version__ = "0.3.0"
