from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_ENVIRONMENTS = frozenset({'develop', 'development'})


class Settings(BaseSettings):
	APP_ENV: str = 'production'

	# Remote rate source
	CURRENCY_CONVERSION_API_ENDPOINT: str = ''
	CURRENCY_CONVERSION_API_SEED: str = ''
	HTTP_TIMEOUT: int = 10
	FETCH_ATTEMPTS: int = 3

	# Local rate source used in development
	FIXTURE_PATH: str = 'data/local.json'

	OUTPUT_FILE: str = 'optimal_conversions.csv'

	# 0 disables the cap
	MAX_RELAXATIONS: int = Field(100_000, ge=0)

	SOURCE_CURRENCY_CODE: str = 'CAD'
	SOURCE_CURRENCY_NAME: str = 'Canada Dollar'
	SOURCE_CURRENCY_AMOUNT: float = 100.0

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@property
	def is_development(self) -> bool:
		return self.APP_ENV.strip().lower() in DEVELOPMENT_ENVIRONMENTS


@lru_cache
def get_settings() -> Settings:
	return Settings()
