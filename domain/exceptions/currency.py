class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class DataUnavailableError(CurrencyException):
    pass

class WriteFailureError(CurrencyException):
    pass


class NonTerminationError(CurrencyException):
    def __init__(self, limit: int, settled: int):
        self.limit = limit
        self.settled = settled
        super().__init__(
            f'Relaxation limit of {limit} exceeded after settling {settled} currencies; '
            'the rate graph likely contains a profitable cycle'
        )
