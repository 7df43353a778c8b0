"""
Best-amount search over a directed exchange-rate graph.

Every currency reachable from the source is settled at the largest amount
obtainable by chaining conversions. Entries are relaxed through a FIFO queue:
an entry is expanded only when it strictly beats the amount already recorded
for its currency, so equal or worse arrivals (including break-even loops) are
dropped.
"""
import logging
from collections import defaultdict, deque
from collections.abc import Iterable

from domain.exceptions.currency import InvalidCurrencyError, NonTerminationError
from domain.models.currency import ConversionResult, ExchangeEdge, SourceCurrency

logger = logging.getLogger(__name__)


def index_outgoing(edges: Iterable[ExchangeEdge]) -> dict[str, list[ExchangeEdge]]:
    """Group edges by the currency they convert from, keeping input order."""
    outgoing: dict[str, list[ExchangeEdge]] = defaultdict(list)
    for edge in edges:
        outgoing[edge.from_code].append(edge)
    return outgoing


def find_best_conversions(
    source: SourceCurrency,
    edges: Iterable[ExchangeEdge],
    max_relaxations: int | None = None,
) -> list[ConversionResult]:
    """
    Return the best reachable amount and path for every currency except the source.

    Results are ordered by first discovery. With ``max_relaxations`` unset the
    search runs until the queue drains, which never happens when a profitable
    cycle is reachable; with it set, exceeding the limit raises
    ``NonTerminationError`` rather than returning partial results.
    """
    if source.amount <= 0:
        raise InvalidCurrencyError(f'Source amount must be positive, got {source.amount}')

    outgoing = index_outgoing(edges)
    best: dict[str, ConversionResult] = {}
    queue = deque([ConversionResult(source.code, source.name, source.amount, (source.code,))])
    relaxations = 0

    while queue:
        entry = queue.popleft()

        current = best.get(entry.code)
        if current is not None and entry.amount <= current.amount:
            continue

        relaxations += 1
        if max_relaxations is not None and relaxations > max_relaxations:
            raise NonTerminationError(limit=max_relaxations, settled=len(best))

        best[entry.code] = entry
        for edge in outgoing.get(entry.code, ()):
            queue.append(
                ConversionResult(
                    code=edge.to_code,
                    name=edge.to_name,
                    amount=entry.amount * edge.rate,
                    path=entry.path + (edge.to_code,),
                )
            )

    best.pop(source.code, None)

    logger.debug(f'Settled {len(best)} currencies from {source.code} in {relaxations} relaxations')
    return list(best.values())
