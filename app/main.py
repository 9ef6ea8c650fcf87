import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api_routers.v1 import api_router
from app.features.health.routes.health import router as health_router
from app.platform.config import settings
from app.platform.exceptions import add_exception_handlers
from app.platform.logger import LOG_FORMAT

# Configure logging to show INFO level messages
logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)

app = FastAPI(
    title=settings.APP_NAME,
    description="Grades a web page against answer-engine optimization (AEO) checks",
    version="1.0.0",
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

app.include_router(health_router)
app.include_router(api_router, prefix="/api")
