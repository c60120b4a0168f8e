"""Rentals administration service: persons and their owner, tenant and employee roles."""

__version__ = "1.0.0"
