"""Generate blog articles with Gemini and republish them to writing platforms."""

__version__ = "0.3.0"
