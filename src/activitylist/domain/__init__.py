"""Domain layer: activity records and their kinds.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
