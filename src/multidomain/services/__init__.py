"""Service layer: domain registry and queries returning ServiceResult.

Services may import from domain and config layers.
They must never import from commands or output.
"""
