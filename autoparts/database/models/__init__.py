from .access import AccessDecision, AccessReason, Operation
from .role import Role
from .user import User

__all__ = ["AccessDecision", "AccessReason", "Operation", "Role", "User"]
