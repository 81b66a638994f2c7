"""Core models, schemas and serialization for separator layouts."""
