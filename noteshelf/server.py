"""
Main FastAPI application for NoteShelf.
Serves the raw Markdown files, the JSON API and the HTML views.
"""

import os
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from .config import (
    APP_DESCRIPTION,
    CONTENT_DIR,
    CONTENT_ROOT,
    CONTENT_URL_PATH,
    LOG_DIR,
    LOG_LEVEL,
    LOG_RETENTION,
    NAME,
)
from .routes.api import documents as api_documents
from .routes.web import docs
from .middleware.security_headers import SecurityHeadersMiddleware
from .middleware.request_logging import RequestLoggingMiddleware
from .services.directory_index import get_directory_index
from .utils.markdown_renderer import get_renderer
from .utils.template_env import get_templates

# Configure loguru
os.makedirs(LOG_DIR, exist_ok=True)
logger.add(
    os.path.join(LOG_DIR, "noteshelf.log"),
    rotation="1 day",
    retention=LOG_RETENTION,
    level=LOG_LEVEL,
)
logger.add(
    os.path.join(LOG_DIR, "errors.log"),
    rotation="1 day",
    retention=LOG_RETENTION,
    level="ERROR",
)

# Create FastAPI app
app = FastAPI(title=NAME, description=APP_DESCRIPTION)

templates = get_templates()

# Raw Markdown files, retrieved by the content fetcher
app.mount(
    CONTENT_URL_PATH,
    StaticFiles(directory=CONTENT_DIR, check_dir=False),
    name="content",
)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Include route modules
app.include_router(docs.router)
app.include_router(api_documents.router, prefix="/api")


@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    if request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)

    if exc.status_code == 404:
        title = "404 Not Found"
        message = "The document you're looking for doesn't exist or has been moved."
    else:
        title = f"{exc.status_code} Error"
        message = exc.detail
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": title, "message": message},
        status_code=exc.status_code,
    )


@app.on_event("startup")
async def startup_event():
    index = get_directory_index()
    get_renderer()
    if not os.path.isdir(CONTENT_DIR):
        logger.warning(f"Content directory {CONTENT_DIR} does not exist")
    logger.info(
        f"{NAME} started: {len(index.directories())} directories, content from {CONTENT_ROOT}"
    )


if __name__ == "__main__":
    import uvicorn
    from .config import HOST, PORT, DEV

    uvicorn.run(app, host=HOST, port=PORT, reload=DEV)
