import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.routes import auth, board, cards, lists, user
from app.db.base import Base
from app.db.sessions import engine
from app.core.config import settings
from app.core.exceptions import register_exception_handlers

# Import all models to ensure they're registered with Base
import app.models

logger = logging.getLogger("app.access")

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Multi-user kanban boards with ordered lists and cards"
)

# CORS configuration; the client sends the session cookie cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    client = request.client.host if request.client else "-"
    logger.info(
        '%s "%s %s" %d %.1fms',
        client, request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


# Register routers
app.include_router(user.router)
app.include_router(auth.router)
app.include_router(board.router)
app.include_router(lists.router)
app.include_router(cards.router)


@app.on_event("startup")
async def startup_event():
    logger.info("%s v%s starting", settings.APP_NAME, settings.APP_VERSION)
    logger.info("Cookie-based JWT authentication enabled")


@app.get("/health")
def health():
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
