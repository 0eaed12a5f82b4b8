"""Service layer — bundle resolution, generation, dedup, and status checking.

Services may import from domain, transforms, and infrastructure layers.
They must never import from commands or output.
"""
