from dataclasses import dataclass

PATH_SEPARATOR = ' | '


@dataclass(frozen=True)
class ExchangeEdge:
    from_code: str
    from_name: str
    to_code: str
    to_name: str
    rate: float  # Units of to_code per unit of from_code


@dataclass(frozen=True)
class SourceCurrency:
    code: str
    name: str
    amount: float


@dataclass(frozen=True)
class ConversionResult:
    code: str
    name: str
    amount: float
    path: tuple[str, ...]  # Currency codes from the source to this currency

    @property
    def path_display(self) -> str:
        return PATH_SEPARATOR.join(self.path)
