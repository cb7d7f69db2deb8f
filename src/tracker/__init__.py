"""BTC price and dominance tracker dashboard."""

__version__ = "0.1.0"
