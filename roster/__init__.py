"""Roster service — people, teams and balanced team assignment."""

__version__ = "1.0.0"
