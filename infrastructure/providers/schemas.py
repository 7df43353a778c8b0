from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from domain.exceptions.currency import DataUnavailableError
from domain.models.currency import ExchangeEdge


class ExchangeEdgeSchema(BaseModel):
	"""One exchange as published by the rate endpoint and the local fixture."""

	model_config = ConfigDict(extra='ignore')

	exchange_rate: float = Field(..., alias='exchangeRate')
	from_currency_code: str = Field(..., alias='fromCurrencyCode', min_length=1)
	from_currency_name: str = Field('', alias='fromCurrencyName')
	to_currency_code: str = Field(..., alias='toCurrencyCode', min_length=1)
	to_currency_name: str = Field('', alias='toCurrencyName')

	def to_domain(self) -> ExchangeEdge:
		return ExchangeEdge(
			from_code=self.from_currency_code,
			from_name=self.from_currency_name,
			to_code=self.to_currency_code,
			to_name=self.to_currency_name,
			rate=self.exchange_rate,
		)


_edge_list_adapter = TypeAdapter(list[ExchangeEdgeSchema])


def parse_exchange_edges(payload: Any, source: str) -> list[ExchangeEdge]:
	try:
		rows = _edge_list_adapter.validate_python(payload)
	except ValidationError as e:
		raise DataUnavailableError(
			f'{source} returned malformed exchange data: {e.error_count()} validation error(s)'
		) from e
	return [row.to_domain() for row in rows]
