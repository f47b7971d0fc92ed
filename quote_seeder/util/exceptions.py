class SeedError(Exception):
    """Base class for every failure that ends a seeding run"""


class ConfigurationError(SeedError):
    pass


class UnknownNetwork(ConfigurationError):
    def __init__(self, network: str):
        self.network = network
        super().__init__(f'Unknown network {network!r}')


class MissingTokenEntry(ConfigurationError):
    def __init__(self, symbol: str, table: str):
        self.symbol = symbol
        self.table = table
        super().__init__(f'Token {symbol!r} has no entry in the {table} table')


class InvalidAddress(ConfigurationError):
    def __init__(self, symbol: str, address: str):
        self.symbol = symbol
        self.address = address
        super().__init__(f'Token {symbol!r} has an invalid contract address: {address!r}')


class ConnectivityError(SeedError):
    """Store unreachable, timed out, or refused the credentials"""


class WriteError(SeedError):
    """The store rejected the batch write"""
