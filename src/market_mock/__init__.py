"""Mock market data API: assets, synthetic prices and portfolio positions."""

__version__ = "0.1.0"
