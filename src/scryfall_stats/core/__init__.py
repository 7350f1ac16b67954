"""
Core support code for Scryfall Search Stats.

Logging setup shared by the client, aggregation and CLI layers.
"""
