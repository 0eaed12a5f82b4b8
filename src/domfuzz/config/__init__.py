"""Configuration — pydantic section models, settings sources, and logging."""
