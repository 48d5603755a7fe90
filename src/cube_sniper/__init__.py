"""Cube Sniper - find upcoming WCA speedcubing competitions near a location.

This package fetches competition listings from the World Cube Association
website (legacy map page or paginated API), normalizes them into a single
record type and filters them by great-circle distance from a search point.
"""

__version__ = "0.1.0"
