"""Utility packages for trlang."""
