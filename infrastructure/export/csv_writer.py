import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from domain.exceptions.currency import WriteFailureError
from domain.models.currency import ConversionResult

logger = logging.getLogger(__name__)

HEADER = ('Currency Code', 'Currency Name', 'Amount', 'Best Path')
DEFAULT_OUTPUT = Path('optimal_conversions.csv')


def format_row(result: ConversionResult) -> tuple[str, str, str, str]:
    # Six decimals keep small-valued currencies such as BTC readable
    return result.code, result.name, f'{result.amount:.6f}', result.path_display


class CsvResultWriter:
    def __init__(self, path: str | Path = DEFAULT_OUTPUT):
        self.path = Path(path)

    def write(self, results: Iterable[ConversionResult]) -> Path:
        try:
            with self.path.open('w', newline='', encoding='utf-8') as handle:
                writer = csv.writer(handle, lineterminator='\n')
                writer.writerow(HEADER)
                writer.writerows(format_row(result) for result in results)
        except OSError as e:
            raise WriteFailureError(f'Failed to write {self.path}: {e.strerror or e}') from e

        logger.info(f'Conversion results saved to {self.path}')
        return self.path
