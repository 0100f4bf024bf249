"""
Models package
"""
from portal.models.user import User, Role

__all__ = ["User", "Role"]
