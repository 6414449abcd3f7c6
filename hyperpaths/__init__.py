"""Spiess-Florian optimal strategies and demand assignment for transit networks."""

__version__ = "0.1.0"
__all__ = ["network", "strategy", "demand", "spiess_florian", "paper"]