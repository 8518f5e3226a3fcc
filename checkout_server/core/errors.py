"""
Exception handlers.

Malformed bodies come back as 400 {"error": "invalid_request"} rather than
FastAPI's stock 422 so every client-input error shares one status code.
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # rejected input is not echoed; inf/nan would not serialize
    details = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": "invalid_request", "details": jsonable_encoder(details)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
