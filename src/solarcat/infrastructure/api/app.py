"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from solarcat.infrastructure.api.routers import products, solar_packages


def create_app() -> FastAPI:
    app = FastAPI(title="SolarCat Catalog API")

    app.include_router(solar_packages.router, prefix="/api/solar-packages", tags=["solar-packages"])
    app.include_router(products.router, prefix="/api/products", tags=["products"])

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    return app
