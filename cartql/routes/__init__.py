# API Routes

from .graphql_router import create_graphql_router
from .orders import router as orders_router

__all__ = ["create_graphql_router", "orders_router"]
