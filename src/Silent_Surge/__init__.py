"""SilentSurge: screens NSE movers for price surges with no social chatter."""

__version__ = "0.1.0"
