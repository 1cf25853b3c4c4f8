"""Domain layer — the date parsing pipeline, the Date value and its errors.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
