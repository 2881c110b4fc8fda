"""Input validation and two-stack operations for the push_swap puzzle."""

__version__ = "0.1.0"