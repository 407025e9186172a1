"""Astro CLI - command-line client for the Astronomer platform."""

__version__ = "0.1.0"
