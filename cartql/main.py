"""
CartQL Application

Headless cart and checkout service. Bring your own product catalog and use
the GraphQL API to calculate carts and turn them into orders.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .database import CartDatabase, OrderDatabase
from .routes import create_graphql_router, orders_router
from .services.cart_service import CartService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"GraphQL endpoint: {settings.graphql_path}")
    logger.info(f"Default currency: {settings.default_currency.value}")
    yield
    logger.info(f"{settings.app_name} shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    cart_service: Optional[CartService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        cart_service: Service to serve (defaults to one backed by fresh
            in-memory stores)
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Headless cart and checkout GraphQL API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.cart_service = cart_service or CartService(
        carts=CartDatabase(),
        orders=OrderDatabase(),
        default_currency=settings.default_currency,
        abandoned_after=timedelta(hours=settings.abandoned_after_hours),
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        create_graphql_router(path=settings.graphql_path, graphiql=settings.graphiql)
    )
    app.include_router(orders_router)

    @app.get("/")
    async def home():
        """Service index"""
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "graphql": settings.graphql_path,
                "orders": "/api/orders",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "cartql"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cartql.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
