"""Skill-based matching and recommendation engine for an internship marketplace."""

__version__ = "0.1.0"
