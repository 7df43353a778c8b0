# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.remote import RemoteExchangeRepository
from domain.exceptions.currency import DataUnavailableError
from domain.models.currency import ExchangeEdge

ENDPOINT = 'https://rates.example.test/api/exchanges'

SAMPLE_PAYLOAD = [
    {
        'exchangeRate': 0.7353,
        'fromCurrencyCode': 'CAD',
        'fromCurrencyName': 'Canada Dollar',
        'toCurrencyCode': 'USD',
        'toCurrencyName': 'United States Dollar',
    },
    {
        'exchangeRate': 7.2104,
        'fromCurrencyCode': 'USD',
        'fromCurrencyName': 'United States Dollar',
        'toCurrencyCode': 'CNY',
        'toCurrencyName': 'China Yuan Renminbi',
    },
]


def make_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status = Mock()
    return response


def make_status_error(status_code: int, text: str) -> httpx.HTTPStatusError:
    error_response = Mock()
    error_response.status_code = status_code
    error_response.text = text
    return httpx.HTTPStatusError('HTTP error', request=Mock(), response=error_response)


def make_repository(client, **kwargs) -> RemoteExchangeRepository:
    kwargs.setdefault('backoff', 0)
    return RemoteExchangeRepository(endpoint=ENDPOINT, seed='42', client=client, **kwargs)


@pytest.mark.asyncio
async def test_fetch_returns_domain_edges():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(SAMPLE_PAYLOAD)

    repository = make_repository(mock_client)

    edges = await repository.fetch()

    assert edges == [
        ExchangeEdge('CAD', 'Canada Dollar', 'USD', 'United States Dollar', 0.7353),
        ExchangeEdge('USD', 'United States Dollar', 'CNY', 'China Yuan Renminbi', 7.2104),
    ]
    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert call_args[0][0] == ENDPOINT
    assert call_args[1]['params'] == {'seed': '42'}


@pytest.mark.asyncio
async def test_fetch_ignores_unknown_fields():
    payload = [dict(SAMPLE_PAYLOAD[0], updatedAt='2024-01-01T00:00:00Z')]
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(payload)

    edges = await make_repository(mock_client).fetch()

    assert len(edges) == 1
    assert edges[0].rate == 0.7353


@pytest.mark.asyncio
async def test_fetch_empty_list():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response([])

    assert await make_repository(mock_client).fetch() == []


@pytest.mark.asyncio
async def test_fetch_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = make_status_error(500, 'Internal Server Error')

    repository = make_repository(mock_client)

    with pytest.raises(DataUnavailableError) as exc_info:
        await repository.fetch()

    assert 'HTTP error 500' in str(exc_info.value)
    # Status errors are not retried
    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_fetch_http_error_from_raise_for_status():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    response = make_response(SAMPLE_PAYLOAD)
    response.raise_for_status.side_effect = make_status_error(404, 'Not Found')
    mock_client.get.return_value = response

    with pytest.raises(DataUnavailableError) as exc_info:
        await make_repository(mock_client).fetch()

    assert '404' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_network_timeout_retried_then_raised():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')

    repository = make_repository(mock_client, attempts=3)

    with pytest.raises(DataUnavailableError) as exc_info:
        await repository.fetch()

    assert 'TimeoutException' in str(exc_info.value)
    assert mock_client.get.call_count == 3


@pytest.mark.asyncio
async def test_fetch_recovers_after_transient_connect_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = [
        httpx.ConnectError('Failed to connect'),
        make_response(SAMPLE_PAYLOAD),
    ]

    edges = await make_repository(mock_client, attempts=2).fetch()

    assert len(edges) == 2
    assert mock_client.get.call_count == 2


@pytest.mark.asyncio
async def test_fetch_invalid_json():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    response = make_response(None)
    response.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
    mock_client.get.return_value = response

    with pytest.raises(DataUnavailableError) as exc_info:
        await make_repository(mock_client).fetch()

    assert 'parsing error' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'payload',
    [
        {'error': 'unexpected object'},
        [{'fromCurrencyCode': 'CAD', 'toCurrencyCode': 'USD'}],
        [{'exchangeRate': 'not-a-number', 'fromCurrencyCode': 'CAD', 'toCurrencyCode': 'USD'}],
    ],
)
async def test_fetch_malformed_payload(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(payload)

    with pytest.raises(DataUnavailableError) as exc_info:
        await make_repository(mock_client).fetch()

    assert 'malformed' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_without_endpoint_configured():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    repository = RemoteExchangeRepository(endpoint='', seed='42', client=mock_client)

    with pytest.raises(DataUnavailableError):
        await repository.fetch()

    mock_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    repository = make_repository(mock_client)

    await repository.close()

    mock_client.aclose.assert_awaited_once()
