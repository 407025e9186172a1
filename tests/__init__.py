"""Astro CLI test package."""
