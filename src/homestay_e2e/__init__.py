"""Browser-driven end-to-end checks for the HealingLand homestay search page."""

__version__ = "0.1.0"
