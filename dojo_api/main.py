import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from dojo_api.core.config import settings
from dojo_api.core.errors import DojoError, InternalError
from dojo_api.core.logger import configure_logging, get_logging_config, logger
from dojo_api.db.init_db import init_db
from dojo_api.routers import auth, config, students


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    init_db()
    yield


class RequestGuardMiddleware(BaseHTTPMiddleware):
    """
    Last line of error handling, mounted inside CORS so every 500 still
    carries CORS headers.

    - requests that outlive the timeout become a 500 instead of hanging
    - unexpected exceptions are logged and become a bare 500
    """

    def __init__(self, app, timeout: float):
        super().__init__(app)
        self.timeout = timeout

    async def dispatch(self, request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(
                "REQUEST TIMEOUT | method=%s | path=%s | timeout=%ss",
                request.method, request.url.path, self.timeout
            )
            return JSONResponse(
                status_code=InternalError.status_code,
                content={"detail": InternalError.detail},
            )
        except Exception:
            logger.exception(
                "UNHANDLED ERROR | method=%s | path=%s", request.method, request.url.path
            )
            return JSONResponse(
                status_code=InternalError.status_code,
                content={"detail": InternalError.detail},
            )


app = FastAPI(
    title="Dojo Backend",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(RequestGuardMiddleware, timeout=settings.REQUEST_TIMEOUT_SECONDS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DojoError)
async def dojo_error_handler(request: Request, exc: DojoError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Backend online 🚀"


app.include_router(auth.router)
app.include_router(students.router)
app.include_router(config.router)


def run():
    logger.info("SERVER STARTING | port=%s", settings.PORT)
    uvicorn.run(
        "dojo_api.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_config=get_logging_config(settings.LOG_LEVEL),
    )


if __name__ == "__main__":
    run()
