from .auth_router import build_auth_router

__all__ = ["build_auth_router"]
