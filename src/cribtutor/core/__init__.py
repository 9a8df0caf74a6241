"""Core models for cribtutor."""
