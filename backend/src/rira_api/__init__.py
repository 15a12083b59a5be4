"""Rira API - employee and task management backend."""

__version__ = "0.1.0"
