from fastapi import FastAPI, Request, Response

# =========================
# RESPONSE HEADERS
# =========================
PAGE_HEADERS = {
    "Content-Type": "text/html",
    "Cache-Control": "no-cache",
}


def create_app(page: bytes) -> FastAPI:
    """
    Every request, whatever its method or path, gets the same
    200 response carrying `page`.
    """
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    # middleware runs before routing, so no 404 / 405 ever escapes
    @app.middleware("http")
    async def handle_request(request: Request, call_next):
        return Response(content=page, status_code=200, headers=PAGE_HEADERS)

    return app
