from fastapi import FastAPI, Request, status, APIRouter
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from app.api.routes import (
    auth as auth_router,
    events as events_router,
    questions as questions_router,
    health as health_router,
)
from app.db.session import init_db
from app.core.config import settings
from app.core.limiter import limiter
from app.core.logging import logger

app = FastAPI(title="EnTalk Questions Tool")

app.state.limiter = limiter
app.state.db_connected = False
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router.router)
api_router.include_router(events_router.router)
api_router.include_router(questions_router.router)

app.include_router(api_router)
app.include_router(health_router.router)


async def server_error_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


app.add_exception_handler(SQLAlchemyError, server_error_handler)
app.add_exception_handler(Exception, server_error_handler)


@app.on_event("startup")
async def on_startup():
    try:
        await init_db()
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        raise
    app.state.db_connected = True
    logger.info("Database connected successfully")


def run():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
