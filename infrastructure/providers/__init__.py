from .base import ExchangeRateRepository
from .fixture import FixtureExchangeRepository
from .remote import RemoteExchangeRepository

__all__ = ['ExchangeRateRepository', 'FixtureExchangeRepository', 'RemoteExchangeRepository']
