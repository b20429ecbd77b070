"""Client-side statement of account retrieval over FinTS."""

__version__ = "1.0.0"
