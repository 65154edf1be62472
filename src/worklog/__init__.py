"""Worklog - personal work wins log with AI merging and reports."""

__version__ = "0.1.0"
