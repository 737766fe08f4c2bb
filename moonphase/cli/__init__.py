"""Command-line interface package for moonphase."""
