"""CLI module for odxproxy."""
