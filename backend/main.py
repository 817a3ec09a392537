import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from routers import health, lists, countries, cities, certifications, translate
from services.catalog_service import TABLE_FILES, get_catalog

logger = logging.getLogger(__name__)

app = FastAPI(title="Lookup API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(lists.router)
app.include_router(countries.router)
app.include_router(cities.router)
app.include_router(certifications.router)
app.include_router(translate.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
async def root():
    return {
        "name": "Lookup API",
        "version": "1.0.0",
        "endpoints": sorted(
            path for path in app.openapi()["paths"] if path.startswith("/api")
        ),
    }


@app.on_event("startup")
async def startup():
    # Fail fast on malformed bundled tables
    get_catalog()
    logger.info("Lookup API is running with %d tables", len(TABLE_FILES))


@app.on_event("shutdown")
async def shutdown():
    from utils.http_client import close_client
    await close_client()


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
