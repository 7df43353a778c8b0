import json
import logging
from pathlib import Path

from domain.exceptions.currency import DataUnavailableError
from domain.models.currency import ExchangeEdge
from infrastructure.providers.schemas import parse_exchange_edges

logger = logging.getLogger(__name__)


class FixtureExchangeRepository:
	"""Serves exchange rates from a JSON file on disk, for development runs."""

	def __init__(self, path: str | Path):
		self.path = Path(path)

	@property
	def name(self) -> str:
		return 'fixture'

	async def fetch(self) -> list[ExchangeEdge]:
		try:
			payload = json.loads(self.path.read_text(encoding='utf-8'))
		except OSError as e:
			raise DataUnavailableError(f'Cannot read rate fixture {self.path}: {e.strerror or e}') from e
		except ValueError as e:
			raise DataUnavailableError(f'Rate fixture {self.path} is not valid JSON: {str(e)}') from e

		edges = parse_exchange_edges(payload, source=f'Rate fixture {self.path}')
		logger.info(f'Loaded {len(edges)} exchange rates from {self.path}')
		return edges

	async def close(self) -> None:
		return None
