from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from src.config import CORS_HEADERS
from src.proxy.handlers import ProxyResponse, handle_geocode, handle_weather

router = APIRouter()


def _json(resp: ProxyResponse) -> JSONResponse:
    return JSONResponse(status_code=resp.status, content=resp.body)


@router.get("/geocode")
def geocode(q: str | None = None) -> JSONResponse:
    return _json(handle_geocode(q))


@router.get("/weather")
def weather(lat: str | None = None, lon: str | None = None) -> JSONResponse:
    return _json(handle_weather(lat, lon))


def create_app() -> FastAPI:
    app = FastAPI(title="WeatherDash proxy")

    # Every response gets permissive CORS headers and any pre-flight is
    # answered with an empty 200, with or without an Origin header.
    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    app.include_router(router)
    # same routes under /api, the path serverless hosts mount handlers on
    app.include_router(router, prefix="/api")

    return app
