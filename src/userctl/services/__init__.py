"""Service layer — business logic returning Result.

Services may import from the domain and plugins layers.
They must never import from commands, output, or config.
"""
