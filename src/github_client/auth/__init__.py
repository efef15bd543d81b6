from .auth_handler import AuthHandler, BearerAuthHandler, CustomAuthHandler, create_auth_handler

__all__ = ["AuthHandler", "BearerAuthHandler", "CustomAuthHandler", "create_auth_handler"]
