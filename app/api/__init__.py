# app/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from app.api.routers import health, products
from app.data.database import Base, make_engine, make_session_factory
from app.data.seed import seed
from app.repos.product_repo import ProductRepo
from app.services.product_service import ProductService
from app.utils.settings import Settings, get_settings
from app.utils.logging import get_logger

# rejestracja modeli w Base.metadata przed create_all
from app.data.models.product import ProductModel  # noqa: F401

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Sklada graf zaleznosci raz przy starcie: engine -> session factory
    -> ProductService (z ProductRepo). Bez globalnego rejestru.
    """
    settings = settings or get_settings()
    owns_engine = engine is None
    engine = engine or make_engine(settings.database_url)
    session_factory = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")
        if settings.seed_data:
            seed(session_factory)
        yield
        if owns_engine:
            engine.dispose()

    # /products/ bez id ma dawac 404, a nie redirect na liste
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.engine = engine
    app.state.product_service = ProductService(session_factory, repo_factory=ProductRepo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.include_router(health.router)
    app.include_router(products.router, prefix=settings.api_prefix)

    return app
