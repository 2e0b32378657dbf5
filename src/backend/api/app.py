from __future__ import annotations

from fastapi import FastAPI

from api.validation import router as validation_router


def create_app() -> FastAPI:
    app = FastAPI(title="Register submission validator")
    app.include_router(validation_router)
    return app


app = create_app()
