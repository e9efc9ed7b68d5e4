# app/main.py
import hmac
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import store
from app.resources import RESOURCES
from app.routers.crud import build_crud_router
from app.settings import get_settings

log = logging.getLogger("uvicorn")

API_KEY_HEADER = "x-api-key"

settings = get_settings()

app = FastAPI(
    title="Climbing Tracker API",
    version=settings.API_VERSION,
    openapi_tags=[
        {"name": "indoor_sessions", "description": "Indoor climbing sessions"},
        {"name": "outdoor_sessions", "description": "Outdoor climbing sessions"},
        {"name": "fingerboard_sessions", "description": "Fingerboard workouts"},
        {"name": "competition_sessions", "description": "Competitions and simulations"},
        {"name": "gym_sessions", "description": "Strength training workouts"},
    ],
)


# Errors go out as a short plain-text message
@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def api_key_ok(presented: str | None, secret: str) -> bool:
    # An unset secret never authenticates
    if not secret or presented is None:
        return False
    return hmac.compare_digest(presented.encode(), secret.encode())


@app.middleware("http")
async def gate(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200)

    s = get_settings()
    if not api_key_ok(request.headers.get(API_KEY_HEADER), s.APP_SECRET_PASSWORD):
        return PlainTextResponse("Unauthorized", status_code=401)

    try:
        request.state.firestore = await run_in_threadpool(store.get_client, s.PROJECT_ID)
    except store.StoreUnavailable:
        return PlainTextResponse("Failed to connect to database", status_code=500)

    return await call_next(request)


@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response


CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = f"Content-Type, {API_KEY_HEADER}"


def allowed_origin(origin: str | None, origins: list[str]) -> str:
    if "*" in origins or not origins:
        return "*"
    if origin in origins:
        return origin
    return origins[0]


# Outermost: CORS headers on every response, whatever the Origin or status
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = allowed_origin(
        request.headers.get("Origin"), settings.CORS_ORIGINS
    )
    response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
    if response.headers["Access-Control-Allow-Origin"] != "*":
        response.headers["Vary"] = "Origin"
    return response


# Routers, in dispatch order
for resource in RESOURCES:
    app.include_router(build_crud_router(resource))
