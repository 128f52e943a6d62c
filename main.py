# Standard library imports
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.api.internal.routes.v1.routes import router as v1_router
from civicconnect.api.internal.utils.exceptions import register_exception_handlers
from civicconnect.core.db import run_with_new_session
from civicconnect.core.monitoring import get_logger, setup_sentry
from civicconnect.db_selectors.auth import get_user_by_email, insert_user_with_profile
from civicconnect.models.auth.profile import Role
from civicconnect.settings import settings
from civicconnect.utils.password_utils import get_password_hash

# Set up the main application logger
logger = get_logger("civicconnect")

if setup_sentry():
    logger.info(f"Sentry initialised in {settings.ENVIRONMENT} environment")


async def create_default_admin_user(db: AsyncSession) -> UUID:
    existing_admin = await get_user_by_email(db, settings.ADMIN_EMAIL)
    if existing_admin is not None:
        logger.info("Admin user already exists.")
        return existing_admin.id

    admin_user = await insert_user_with_profile(
        db,
        email=settings.ADMIN_EMAIL,
        hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
        display_name=settings.ADMIN_DISPLAY_NAME,
        role=Role.ADMIN.value,
    )
    logger.info("Admin user created.")
    return admin_user.id


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


def create_app(seed_admin: bool = True) -> FastAPI:
    """Create and configure FastAPI application"""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting up FastAPI application")

        if seed_admin:
            try:
                admin_id = await run_with_new_session(create_default_admin_user)
                logger.info(f"Admin user ready with ID: {admin_id}")
            except Exception as e:
                logger.error(f"Failed to create admin user: {e}")

        yield

        logger.info("Shutting down FastAPI application")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Civic issue reporting: citizens report, authorities triage, the public follows progress.",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "1.0.0"}

    app.include_router(v1_router, prefix=settings.API_V1_STR)

    return app


# Create the app instance
app = create_app()
