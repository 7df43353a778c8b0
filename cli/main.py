import asyncio
import logging
import sys

from cli.dependencies import build_conversion_service, build_repository, build_source
from config.settings import Settings, get_settings
from domain.exceptions.currency import (
    DataUnavailableError,
    InvalidCurrencyError,
    NonTerminationError,
    WriteFailureError,
)
from monitoring.logger import setup_logging, time_operation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CODES: dict[type[Exception], int] = {
    DataUnavailableError: 2,
    WriteFailureError: 3,
    NonTerminationError: 4,
    InvalidCurrencyError: 5,
}


def exit_code_for(exc: Exception) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(exc, error_type):
            return code
    return EXIT_UNEXPECTED


async def main(settings: Settings) -> int:
    source = build_source(settings)
    repository = build_repository(settings)
    service = build_conversion_service(settings, repository)

    try:
        with time_operation('Optimal conversion run', logger):
            results = await service.run(source)
    except Exception as e:
        logger.error(f'An error occurred: {e}', exc_info=not isinstance(e, tuple(EXIT_CODES)))
        return exit_code_for(e)
    finally:
        await repository.close()

    logger.info(f'Found best conversions for {len(results)} currencies from {source.code}')
    return EXIT_OK


def run() -> None:
    settings = get_settings()
    setup_logging(console_level=settings.LOG_LEVEL, log_directory=settings.LOG_DIRECTORY)
    sys.exit(asyncio.run(main(settings)))


if __name__ == '__main__':
    run()
