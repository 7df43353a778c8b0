import logging

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.exceptions.currency import DataUnavailableError
from domain.models.currency import ExchangeEdge
from infrastructure.providers.schemas import parse_exchange_edges

logger = logging.getLogger(__name__)


class RemoteExchangeRepository:
    """Fetches the full exchange list from the configured rate endpoint."""

    def __init__(
        self,
        endpoint: str,
        seed: str,
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
        attempts: int = 3,
        backoff: float = 1.0,
    ):
        self.endpoint = endpoint
        self.seed = seed
        self.attempts = max(1, attempts)
        self.backoff = backoff
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return 'remote'

    async def _get(self, params: dict) -> httpx.Response:
        # Only transport failures (timeouts, refused connections) are retried
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=self.backoff, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return await retrying(self._client.get, self.endpoint, params=params)

    async def _request(self) -> object:
        if not self.endpoint:
            raise DataUnavailableError('Rate endpoint is not configured')

        try:
            response = await self._get({'seed': self.seed})
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise DataUnavailableError(
                f'Rate endpoint HTTP error {e.response.status_code}: {e.response.text[:200]}'
            ) from e
        except httpx.RequestError as e:
            raise DataUnavailableError(f'Rate endpoint request failed: {e.__class__.__name__}') from e
        except ValueError as e:
            raise DataUnavailableError(f'Rate endpoint response parsing error: {str(e)}') from e

    async def fetch(self) -> list[ExchangeEdge]:
        payload = await self._request()
        edges = parse_exchange_edges(payload, source='Rate endpoint')
        logger.info(f'Fetched {len(edges)} exchange rates from {self.endpoint}')
        return edges

    async def close(self) -> None:
        await self._client.aclose()
