"""Domain services."""

from .base import Service, StoreBackedService
from .comment_service import CommentService
from .comment_tree import CommentNode, build_forest, count_nodes, find_node, iter_nodes
from .entitlement_service import EntitlementService, Entitlements, can_write
from .jwt_service import JWTService
from .profile_service import ProfileService

__all__ = [
    "CommentNode",
    "CommentService",
    "EntitlementService",
    "Entitlements",
    "JWTService",
    "ProfileService",
    "Service",
    "StoreBackedService",
    "build_forest",
    "can_write",
    "count_nodes",
    "find_node",
    "iter_nodes",
]
