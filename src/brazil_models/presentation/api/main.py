from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from brazil_models.config import configure_logging
from brazil_models.domain.errors import DocumentError
from brazil_models.presentation.api.routes.documents import registry
from brazil_models.presentation.api.routes.documents import router as documents_router
from brazil_models.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="Brazil Models", version="0.1.0")
app.include_router(health_router)
app.include_router(documents_router)


@app.exception_handler(DocumentError)
async def invalid_input(request: Request, exc: DocumentError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
