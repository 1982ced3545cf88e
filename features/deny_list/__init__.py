"""Deny-list (NG files) feature module."""

from .deny_list_store import DenyListStore

__all__ = ["DenyListStore"]
