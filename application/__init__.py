"""
Application layer for the progression engine.

This package contains:
- ports/: Collaborator interfaces (workout logs, exercise catalog)
"""
