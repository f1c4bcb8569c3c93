"""Domain layer — metadata schema, front-matter parsing, article helpers.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
