"""
Main FastAPI application for the game reviews service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.ids import create_id_generator
from ..store.memory import ReviewStore
from ..store.seed_data import build_store
from ..validation import validate_startup_store

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting game reviews API...", **app.state.store.counts())
    validate_startup_store(app.state.store, app.state.settings)

    yield

    logger.info("Shutting down game reviews API...")


def create_store(current: Settings) -> ReviewStore:
    """Build the store described by ``current``."""
    return build_store(
        seed_path=current.seed_data_path,
        use_defaults=current.seed_defaults,
        id_generator=create_id_generator(current.id_strategy),
    )


def create_app(store: ReviewStore | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve; built from settings when omitted
        app_settings: Settings override, mainly for tests
    """
    current = app_settings or settings
    if store is None:
        store = create_store(current)

    app = FastAPI(
        title="Game Reviews API",
        description="GraphQL API over games, reviews and authors",
        version=__version__,
        lifespan=lifespan,
        debug=current.debug,
    )
    app.state.store = store
    app.state.settings = current

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=current.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "counts": store.counts()}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast on an unresolvable schema
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=current.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gamereviews.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
