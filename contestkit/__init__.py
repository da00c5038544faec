"""Competitive programming problem solutions and number theory helpers as plain Python functions."""

__version__ = "0.1.0"