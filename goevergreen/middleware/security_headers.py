from fastapi import FastAPI, Request

from goevergreen.templates.layout import SECURITY_HEADERS

def setup_security_headers(app: FastAPI):
    """Add the hardening headers to every response that doesn't already set them"""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response
