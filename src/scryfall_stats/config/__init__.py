"""Configuration for Scryfall Search Stats."""
