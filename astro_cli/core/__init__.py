"""Astro CLI core: configuration and the exception hierarchy."""
