"""Prime Minister lifespan analysis."""

__version__ = "0.1.0"
