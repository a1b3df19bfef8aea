"""
Cyberpeers Server - FastAPI Application

User profiles and an activity audit trail backed by MongoDB, with
authentication delegated to an external identity provider.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cyberpeers.config import get_settings
from cyberpeers.core.exceptions import (
    APIError,
    api_error_handler,
    unhandled_exception_handler,
)
from cyberpeers.core.identity import get_identity_verifier
from cyberpeers.database.connections import close_connections
from cyberpeers.routers import health, root, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("cyberpeers")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Build the identity verifier (fails fast on a bad credential bundle)

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up Cyberpeers Server...")
    get_identity_verifier()
    logger.info("Identity provider ready: %s", settings.identity_provider)

    yield

    logger.info("Shutting down Cyberpeers Server...")
    await close_connections()
    logger.info("Database connection closed")


# Create FastAPI application
app = FastAPI(
    title="Cyberpeers API",
    description="""
## Cyberpeers User Management API

### Features
- **Profiles**: Profiles are created on first sign-in and updated on every login
- **Activities**: Append-only audit trail of user and admin actions
- **Admin**: List users, dashboard statistics, role and status changes

### Authentication
Every endpoint except `/` and `/health` requires an identity token:
```
Authorization: Bearer <id_token>
```
User endpoints also require `?email=` to match the token's email claim.
Admin endpoints require `?email=` to belong to an admin profile.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Include routers
app.include_router(root.router)
app.include_router(health.router)
app.include_router(users.router)
