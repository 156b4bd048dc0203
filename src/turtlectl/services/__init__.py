"""Service layer: wraps the pure grammar in ServiceResult for the CLI.

Services may import from domain and config.
They must never import from commands or output.
"""
