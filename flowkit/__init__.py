"""Flow project configuration, its JSON sections and loading, and transaction events."""

__version__ = "1.0.0"