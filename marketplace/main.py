"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.api import auth, listings
from marketplace.api.identity import HeaderIdentityResolver
from marketplace.config import Settings, get_settings
from marketplace.database import create_db_engine, create_session_factory, init_db
from marketplace.logging_config import setup_logging
from marketplace.services.auth import AuthService, PasswordHasher
from marketplace.services.listing_service import ListingService
from marketplace.store import SqlAlchemyStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and wire its services."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables on startup, release connections on shutdown."""
        init_db(engine)
        logger.info(f"Marketplace API started ({settings.environment})")
        yield
        engine.dispose()

    app = FastAPI(
        title="Marketplace API",
        description="Peer-to-peer marketplace for selling and renting items",
        version="0.1.0",
        lifespan=lifespan,
    )

    store = SqlAlchemyStore(create_session_factory(engine))
    app.state.settings = settings
    app.state.engine = engine
    app.state.store = store
    app.state.auth_service = AuthService(store, PasswordHasher(settings.bcrypt_rounds))
    app.state.listing_service = ListingService(store)
    app.state.identity_resolver = HeaderIdentityResolver(settings.identity_header)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routers
    app.include_router(auth.router)
    app.include_router(listings.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
