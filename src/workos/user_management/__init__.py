"""A module for interacting with the WorkOS User Management API.

`WorkOS Docs: User Management <https://workos.com/docs/user-management>`_
"""

from workos.user_management.operations import AsyncUserManagement, UserManagement

__all__ = ["AsyncUserManagement", "UserManagement"]
