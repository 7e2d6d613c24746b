"""Domain layer — the name value type and its construction rules.

This layer depends only on stdlib, pydantic and the ``idna`` codec.
It must never import from services, commands, output, or config.
"""
