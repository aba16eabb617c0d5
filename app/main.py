import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_file_store
from app.api.endpoints import analytics, files
from app.api.exception_handlers import setup_exception_handlers
from app.core import config
from app.core.logging import configure_logging
from app.schemas.health import HealthOut

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_file_store()
    store.ensure_root()
    logger.info("Serving files from %s", store.root)
    yield


app = FastAPI(title="File Store", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(files.router)
app.include_router(analytics.router)


@app.get("/health", tags=["Health"], response_model=HealthOut)
def health():
    return HealthOut(status="ok")


def run():
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)
