"""Transformation registry — lookup tables and string-mutation algorithms.

Every algorithm is a pure generator over a parsed :class:`~domfuzz.domain.names.Domain`.
The registry built by :func:`~domfuzz.transforms.registry.build_registry` is the
only place tables and algorithms are wired together.
"""
