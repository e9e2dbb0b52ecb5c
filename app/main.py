"""FastAPI application entrypoint for the contacts service."""

from fastapi import FastAPI

from app.api.contacts import router as contacts_router
from app.core.errors import register_error_handlers
from app.db import models as _models  # noqa: F401

app = FastAPI(title="Contacts")
register_error_handlers(app)
app.include_router(contacts_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check stub endpoint for service readiness."""
    return {"status": "ok"}
