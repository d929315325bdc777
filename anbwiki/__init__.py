"""Game data extraction for the Anbennar wiki."""

__version__ = "0.1.0"
