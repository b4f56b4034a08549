"""Domain layer — Result type, combinators, conversions, and user rules.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
