from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.database import close_db_connections, init_models
from .core.exceptions import general_exception_handler
from .core.logging import setup_logging

# Import all routers
from .routers import health, log, measurement, person, lesson, student_lesson, hub

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting BackEye Data Management API")

    if settings.create_tables_on_startup:
        await init_models()

    yield

    logger.info("Shutting down BackEye Data Management API")
    await close_db_connections()
    logger.info("Shutdown complete")

app = FastAPI(
    title="BackEye Data Management API",
    description="Classroom monitoring backend: people, lessons, attendance measurements and logs",
    version=settings.app_version,
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

app.add_exception_handler(Exception, general_exception_handler)

# Include all routers
app.include_router(health.router)
app.include_router(person.router)
app.include_router(lesson.router)
app.include_router(student_lesson.router)
app.include_router(measurement.router)
app.include_router(log.router)
app.include_router(hub.router)

@app.get("/")
async def root():
    return {
        "message": "BackEye Data Management API",
        "version": settings.app_version,
        "status": "active"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backeye.main:app", host="0.0.0.0", port=8000, reload=True)
