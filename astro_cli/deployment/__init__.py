"""Deployment operations."""

from .user import add_user, delete_user, update_user

__all__ = [
    "add_user",
    "delete_user",
    "update_user",
]
