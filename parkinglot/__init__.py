"""Parking lot domain model: cars, lots, observers, attendants and police queries."""

__version__ = "0.1.0"