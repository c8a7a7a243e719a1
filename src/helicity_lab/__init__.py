"""Helicity Lab - an interactive toy model of beta decay spin bookkeeping."""

__version__ = "1.0.0"
