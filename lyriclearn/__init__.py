"""LyricLearn: learn Spanish through song lyrics."""

__version__ = "1.0.0"
