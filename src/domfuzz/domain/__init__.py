"""Domain layer — names, candidates, error kinds, and enums.

This layer depends only on stdlib and pydantic.
It must never import from transforms, services, infrastructure, commands, or config.
"""
