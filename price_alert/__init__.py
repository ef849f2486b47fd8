"""Desktop price alerts for tracked online products."""

__version__ = "0.1.0"
