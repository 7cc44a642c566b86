"""Access policies."""

from .access_policy import OpenAccessPolicy, OwnerAccessPolicy, get_access_policy

__all__ = ["OpenAccessPolicy", "OwnerAccessPolicy", "get_access_policy"]
