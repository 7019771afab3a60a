"""Domain layer: request context, path patterns, and domain resolvers.

This layer depends only on stdlib.
It must never import from services, config, commands, or output.
"""
