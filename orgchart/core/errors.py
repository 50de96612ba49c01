# (c) Copyright Datacraft, 2026
"""Exception handlers translating service errors into HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from orgchart.core import exceptions as exc

logger = logging.getLogger(__name__)

# Checked in order, first match wins
STATUS_BY_ERROR: list[tuple[type[exc.OrgChartError], int]] = [
	(exc.NotFoundError, status.HTTP_404_NOT_FOUND),
	(exc.IdentifierDuplicated, status.HTTP_409_CONFLICT),
	(exc.BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
	(exc.InvalidInput, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: exc.OrgChartError) -> int:
	for error_cls, status_code in STATUS_BY_ERROR:
		if isinstance(error, error_cls):
			return status_code
	return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:

	@app.exception_handler(exc.OrgChartError)
	async def orgchart_error_handler(request: Request, error: exc.OrgChartError):
		status_code = status_for(error)
		logger.info(
			f"{request.method} {request.url.path} -> {status_code}: {error.message}"
		)
		return JSONResponse(status_code=status_code, content={"detail": error.message})

	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(request: Request, error: RequestValidationError):
		"""Malformed ids and bodies are client errors (400), not 422."""
		return JSONResponse(
			status_code=status.HTTP_400_BAD_REQUEST,
			content={"detail": jsonable_encoder(error.errors())},
		)

	@app.exception_handler(Exception)
	async def unhandled_error_handler(request: Request, error: Exception):
		logger.error(
			f"Unhandled exception on {request.method} {request.url.path}: {error}",
			exc_info=True,
		)
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={"detail": "Internal server error", "error": str(error)},
		)
