"""GraphQL endpoint"""

from typing import Any

from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from ..api.schema import schema


async def get_context(request: Request) -> dict[str, Any]:
    """Expose the app's cart service to resolvers"""
    return {"cart_service": request.app.state.cart_service}


def create_graphql_router(path: str = "/graphql", graphiql: bool = True) -> GraphQLRouter:
    """Create the GraphQL router mounted at `path`"""
    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
        tags=["GraphQL"],
    )
