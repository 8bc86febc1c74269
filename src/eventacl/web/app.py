"""FastAPI application for the relationship event ACL.

Exposes the ACL core to the host CMS (closure, row filtering, single
record gates) and the settings endpoints of the admin screen.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from eventacl.acl.service import EventACLService
from eventacl.admin.service import AdminConfigService
from eventacl.attributes.store import AttributeStore
from eventacl.core.config import Settings
from eventacl.core.errors import AccessDenied, ConfigurationMissing
from eventacl.db.engine import DatabaseManager
from eventacl.fixtures import InMemoryStores, load_fixtures
from eventacl.identity.middleware import IdentityMiddleware
from eventacl.repositories.postgres.attributes import PostgresAttributeRepository
from eventacl.repositories.postgres.config import PostgresConfigRepository
from eventacl.repositories.postgres.identity import PostgresIdentityRepository
from eventacl.repositories.postgres.links import PostgresResourceLinkRepository
from eventacl.repositories.postgres.relationships import PostgresRelationshipRepository
from eventacl.web.acl_router import router as acl_router
from eventacl.web.admin_router import router as admin_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    storage: str
    version: str = "0.1.0"


def create_app(
    settings: Settings | None = None,
    stores: InMemoryStores | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    With ``settings.db.database_url`` set, the SQL repositories are wired
    to an async engine. Otherwise in-memory stores are used, taken from
    ``stores`` or loaded from the YAML fixtures.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("eventacl").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Relationship Event ACL",
        description="Relationship-based edit rights for events, participants and contributions",
        version="0.1.0",
    )

    if settings.db.database_url:
        db = DatabaseManager.from_config(settings.db)
        config_store = PostgresConfigRepository(db)
        acl_service = EventACLService(
            relationships=PostgresRelationshipRepository(db),
            links=PostgresResourceLinkRepository(db),
            config_store=config_store,
            identity=PostgresIdentityRepository(db),
            attribute_factory=lambda key: PostgresAttributeRepository.bind(db, key),
            acl_config=settings.acl,
        )
        app.state.db_manager = db
        storage = "sql"
    else:
        if stores is None:
            stores = load_fixtures(settings.acl.fixtures_path)
        config_store = stores.config
        acl_service = EventACLService(
            relationships=stores.relationships,
            links=stores.links,
            config_store=config_store,
            identity=stores.identity,
            attribute_factory=lambda key: AttributeStore(stores.catalog, key),
            acl_config=settings.acl,
        )
        app.state.stores = stores
        storage = "memory"

    logger.info("Relationship ACL using %s storage", storage)

    app.state.settings = settings
    app.state.config_store = config_store
    app.state.acl_service = acl_service
    app.state.admin_service = AdminConfigService(config_store)

    app.add_middleware(IdentityMiddleware)

    @app.exception_handler(ConfigurationMissing)
    async def configuration_missing_handler(
        _request: Request, exc: ConfigurationMissing
    ) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(AccessDenied)
    async def access_denied_handler(_request: Request, exc: AccessDenied) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={
                "detail": str(exc),
                "resource_kind": str(exc.resource_kind),
                "resource_id": exc.resource_id,
            },
        )

    app.include_router(acl_router)
    app.include_router(admin_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="eventacl", storage=storage)

    if settings.db.database_url:

        @app.on_event("shutdown")
        async def dispose_engine() -> None:
            await app.state.db_manager.close()

    return app
