"""domfuzz — lookalike domain generation for typosquatting defence."""

__version__ = "0.4.0"
