"""
Repositories package
"""
from portal.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
