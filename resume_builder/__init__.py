"""Resume Builder - rule-based resume quality scoring."""

__version__ = "0.1.0"
