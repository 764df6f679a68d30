"""Core business logic layer.

Subpackages:
- week: date arithmetic, the week calendar and the plan list
- chat: classifying model replies and running a chat turn
"""
__all__ = ["week", "chat"]
