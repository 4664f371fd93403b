from fastapi import FastAPI, Request, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from prolink.core.config import settings
from prolink.core.errors import MutationFailure, QueryFailure
from prolink.db.init_db import create_all_tables
from prolink.middleware.request_logging import RequestLoggingMiddleware
from prolink.middleware.auth_logging import AuthLoggingMiddleware
from prolink.modules.profiles.api.router import router as profiles_router
from prolink.modules.markets.api.router import router as markets_router
from prolink.modules.posts.api.router import router as posts_router
from prolink.modules.posts.interactions.api.router import router as interactions_router
from prolink.modules.connections.api.router import router as connections_router
from prolink.modules.notifications.api.router import router as notifications_router
from prolink.modules.home_feed.api.router import router as home_feed_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("prolink")

async def query_failure_handler(request: Request, exc: QueryFailure) -> JSONResponse:
    # The caller keeps whatever it rendered before and shows the message
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.message})

async def mutation_failure_handler(request: Request, exc: MutationFailure) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})

# Initialize the FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    exception_handlers={
        RequestValidationError: request_validation_exception_handler,
        HTTPException: http_exception_handler,
        QueryFailure: query_failure_handler,
        MutationFailure: mutation_failure_handler,
    },
    debug=settings.DEBUG,
    description="Professional network: market feeds, connections and notifications",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    create_all_tables()

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(AuthLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(profiles_router, prefix=f"{settings.API_V1_STR}/profiles", tags=["profiles"])
app.include_router(markets_router, prefix=f"{settings.API_V1_STR}/markets", tags=["markets"])
app.include_router(posts_router, prefix=f"{settings.API_V1_STR}/posts", tags=["posts"])
app.include_router(interactions_router, prefix=f"{settings.API_V1_STR}/posts/{{post_id}}", tags=["interactions"])
app.include_router(connections_router, prefix=f"{settings.API_V1_STR}/connections", tags=["connections"])
app.include_router(notifications_router, prefix=f"{settings.API_V1_STR}/notifications", tags=["notifications"])
app.include_router(home_feed_router, prefix=f"{settings.API_V1_STR}/feed", tags=["home feed"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to Prolink",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("prolink.main:app", host="0.0.0.0", port=8000, reload=True)
