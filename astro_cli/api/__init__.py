"""Astro CLI API package."""
