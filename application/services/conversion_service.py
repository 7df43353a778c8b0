import logging

from application.services.best_conversion import find_best_conversions
from domain.models.currency import ConversionResult, SourceCurrency
from infrastructure.export.csv_writer import CsvResultWriter
from infrastructure.providers.base import ExchangeRateRepository

logger = logging.getLogger(__name__)


class ConversionService:
	def __init__(
		self,
		repository: ExchangeRateRepository,
		writer: CsvResultWriter,
		max_relaxations: int | None = None,
	):
		self.repository = repository
		self.writer = writer
		self.max_relaxations = max_relaxations

	async def run(self, source: SourceCurrency) -> list[ConversionResult]:
		edges = await self.repository.fetch()
		logger.info(
			f'Computing best conversions from {source.amount} {source.code} '
			f'over {len(edges)} rates from the {self.repository.name} source'
		)

		results = find_best_conversions(source, edges, max_relaxations=self.max_relaxations)

		self.writer.write(results)
		return results
