#!/usr/bin/env python
import traceback
import uuid
from contextlib import asynccontextmanager
from datetime import datetime

import certifi
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings

# Import custom exceptions and logging
from exceptions import BlogAPIException, ValidationException
from logging_config import logger
from routers.posts import router as posts_router
from routers.root import router as root_router
from utils import field_path


def create_mongo_client(db_url: str) -> AsyncIOMotorClient:
    """Motor client for the given URL; Atlas (SRV) connections verify against certifi's CA bundle"""
    options = {"serverSelectionTimeoutMS": settings.DB_TIMEOUT_MS}
    if db_url.startswith("mongodb+srv://"):
        options["tlsCAFile"] = certifi.where()
    return AsyncIOMotorClient(db_url, **options)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Blog Posts API server...")
    logger.info(f"Connecting to MongoDB: {settings.DB_NAME}")
    app.state.client = create_mongo_client(settings.DB_URL)
    app.state.mongodb = app.state.client[settings.DB_NAME]
    logger.info("MongoDB client created")

    yield

    # Shutdown
    logger.info("Shutting down Blog Posts API server...")
    app.state.client.close()
    logger.info("MongoDB connection closed")


app = FastAPI(
    lifespan=lifespan,
    title="Blog Posts API",
    version="1.0.0",
    description="""
## Blog Posts API

List, create, update and delete blog posts stored in MongoDB.

### Error Handling

All errors return a standardized format with correlation IDs for debugging:

```json
{
  "error": {
    "message": "BlogPost with resource ID '...' not found",
    "status_code": 404,
    "correlation_id": "uuid",
    "timestamp": "ISO-8601",
    "path": "/posts/...",
    "details": {}
  }
}
```
    """,
    openapi_tags=[
        {"name": "posts", "description": "Blog post CRUD operations"},
        {"name": "root", "description": "Entry endpoints and health check"},
    ],
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(request: Request, correlation_id: str, message, status_code: int,
                   details: dict | None = None) -> JSONResponse:
    content = {
        "error": {
            "message": message,
            "status_code": status_code,
            "correlation_id": correlation_id,
            "timestamp": datetime.utcnow().isoformat(),
            "path": request.url.path,
            "details": details or {},
        }
    }
    return JSONResponse(status_code=status_code, content=content)


# Exception Handlers
@app.exception_handler(BlogAPIException)
async def blog_api_exception_handler(request: Request, exc: BlogAPIException):
    """Handle all custom API exceptions"""
    correlation_id = str(uuid.uuid4())

    # Log the error with correlation ID
    logger.bind(
        correlation_id=correlation_id,
        status_code=exc.status_code,
        path=request.url.path,
        details=exc.details,
    ).error(f"[{correlation_id}] {exc.__class__.__name__}: {exc.message}")

    return error_response(request, correlation_id, exc.message, exc.status_code, exc.details)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies with 400 instead of FastAPI's default 422"""
    errors = [
        {"field": field_path(error.get("loc", ())), "type": error.get("type"), "message": error.get("msg")}
        for error in exc.errors()
    ]
    first = errors[0] if errors else {"field": "body", "type": "", "message": "Invalid request"}
    if first["type"] == "json_invalid":
        # loc holds a byte offset into the body, not a field name
        first["field"] = "body"
        message = f"Request body is not valid JSON: {first['message']}"
    elif first["type"] == "missing":
        message = f"Missing `{first['field']}` in request body"
    else:
        message = f"Invalid `{first['field']}`: {first['message']}"

    return await blog_api_exception_handler(
        request, ValidationException(first["field"], message, {"errors": errors})
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTPExceptions (including unknown routes) with consistent format"""
    correlation_id = str(uuid.uuid4())

    logger.bind(
        correlation_id=correlation_id,
        status_code=exc.status_code,
        path=request.url.path,
    ).error(f"[{correlation_id}] HTTPException: {exc.detail}")

    return error_response(request, correlation_id, exc.detail, exc.status_code)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected exceptions"""
    correlation_id = str(uuid.uuid4())

    # Log full traceback for unexpected errors
    logger.bind(
        correlation_id=correlation_id,
        path=request.url.path,
        traceback=traceback.format_exc(),
    ).error(f"[{correlation_id}] Unhandled exception: {str(exc)}")

    return error_response(request, correlation_id, "An unexpected error occurred", 500)


app.include_router(root_router, prefix="", tags=["root"])
app.include_router(posts_router, prefix="/posts", tags=["posts"])

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=not settings.is_production())
