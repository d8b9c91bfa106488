"""Revenue and reward analytics for the Eternum game economy."""

__version__ = "1.0.0"
