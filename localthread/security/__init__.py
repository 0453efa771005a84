# Request authentication

from .auth import AuthContext, AuthDependency, BearerAuthMiddleware, require_auth

__all__ = ["AuthContext", "AuthDependency", "BearerAuthMiddleware", "require_auth"]
