import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.schemas import ExchangeRateResponse
from domain.exceptions.currency import ExchangeRateUnavailableError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ExchangeRateUnavailableError)
	async def exchange_rate_unavailable_handler(request: Request, exc: ExchangeRateUnavailableError):
		logger.error(f'exchange-rate handler unexpected error: {exc}', exc_info=exc)
		if exc.snapshot is None:
			return JSONResponse(status_code=500, content={'detail': 'Exchange rate service unavailable'})
		body = ExchangeRateResponse.from_snapshot(exc.snapshot)
		return JSONResponse(status_code=500, content=body.model_dump(by_alias=True, exclude_unset=True))
