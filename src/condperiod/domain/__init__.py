"""Domain layer — kinds, errors, durations, periods and collections.

This layer depends only on stdlib and isodate.
It must never import from services, commands, config, or output.
"""
