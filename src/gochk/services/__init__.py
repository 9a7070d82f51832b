"""Service layer — dependency resolution and checking.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
