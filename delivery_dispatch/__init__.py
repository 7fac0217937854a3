"""Delivery Dispatch - driver assignment and distance ranking service."""

__version__ = "1.0.0"
