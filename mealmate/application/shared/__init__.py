"""Helpers shared by application handlers."""

from .profile_locks import ProfileLocks, profile_locks

__all__ = ["ProfileLocks", "profile_locks"]
