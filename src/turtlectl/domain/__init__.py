"""Domain layer: direction and command types, errors, and the line grammar.

This layer depends only on stdlib and pydantic. Everything here is pure:
no I/O, no logging, no shared mutable state.
It must never import from services, commands, output, or config.
"""
