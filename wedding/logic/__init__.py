"""Core business logic layer.

Subpackages:
- planning: template seeding and the session plan store
- reporting: completion score and plan summary
"""
__all__ = ["planning", "reporting"]
