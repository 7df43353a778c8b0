import logging

from application.services import ConversionService
from config.settings import Settings
from domain.models.currency import SourceCurrency
from infrastructure.export.csv_writer import CsvResultWriter
from infrastructure.providers import (
	ExchangeRateRepository,
	FixtureExchangeRepository,
	RemoteExchangeRepository,
)

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> ExchangeRateRepository:
	if settings.is_development:
		logger.info(f'Development mode: reading rates from {settings.FIXTURE_PATH}')
		return FixtureExchangeRepository(settings.FIXTURE_PATH)

	return RemoteExchangeRepository(
		endpoint=settings.CURRENCY_CONVERSION_API_ENDPOINT,
		seed=settings.CURRENCY_CONVERSION_API_SEED,
		timeout=settings.HTTP_TIMEOUT,
		attempts=settings.FETCH_ATTEMPTS,
	)


def build_conversion_service(settings: Settings, repository: ExchangeRateRepository) -> ConversionService:
	return ConversionService(
		repository=repository,
		writer=CsvResultWriter(settings.OUTPUT_FILE),
		max_relaxations=settings.MAX_RELAXATIONS or None,
	)


def build_source(settings: Settings) -> SourceCurrency:
	return SourceCurrency(
		code=settings.SOURCE_CURRENCY_CODE,
		name=settings.SOURCE_CURRENCY_NAME,
		amount=settings.SOURCE_CURRENCY_AMOUNT,
	)
