"""Domain layer — validators, schemas, the prompt loop, and the record session.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
