from typing import Protocol, runtime_checkable

from domain.models.currency import ExchangeEdge


@runtime_checkable
class ExchangeRateRepository(Protocol):
    """A source of directed exchange-rate edges."""

    @property
    def name(self) -> str:
        ...

    async def fetch(self) -> list[ExchangeEdge]:
        ...

    async def close(self) -> None:
        ...
