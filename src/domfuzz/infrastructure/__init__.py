"""Infrastructure layer — filesystem access for word lists.

This layer depends on stdlib only.
It must never import from services, commands, or output.
"""
