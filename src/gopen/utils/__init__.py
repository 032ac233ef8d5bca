"""Utility functions for gopen."""
