from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import configure_logging

from app.api.routes.auth import router as auth_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Espasyo API", version="0.1.0")

app.include_router(auth_router)

@app.get("/health")
def health():
    return {"status": "ok"}
