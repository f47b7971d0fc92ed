import mongoengine
from pymongo.errors import ServerSelectionTimeoutError
from pytest import fixture

from quote_seeder.db import Token
from quote_seeder.tokens import TokenTables
from quote_seeder.util.config import Config, get_config
from quote_seeder.util.exceptions import WriteError
from tests import config as test_config


class FakeClient:
    def __init__(self, store: 'FakeStore'):
        self.store = store

    def server_info(self):
        if self.store.unreachable:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        return {'version': '4.4.0', 'ok': 1.0}


class FakeStore:
    """Stands in for mongoengine's connection registry and the tokens collection"""

    def __init__(self):
        self.unreachable = False
        self.reject_writes = False
        self.connects = []
        self.disconnects = 0
        self.batches = []

    def connect(self, db=None, host=None, **kwargs):
        self.connects.append({'db': db, 'host': host, **kwargs})
        return FakeClient(self)

    def disconnect(self, alias='default'):  # pylint: disable=unused-argument
        self.disconnects += 1

    def insert_many(self, documents):
        if self.reject_writes:
            raise WriteError(f'Failed inserting {len(documents)} tokens: E11000 duplicate key error')
        self.batches.append(list(documents))
        return len(documents)

    @property
    def documents(self):
        return [doc for batch in self.batches for doc in batch]


@fixture
def store(monkeypatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr(mongoengine, 'connect', fake.connect)
    monkeypatch.setattr(mongoengine, 'disconnect', fake.disconnect)
    monkeypatch.setattr(Token, 'insert_many', fake.insert_many)
    return fake


@fixture
def clean_env(monkeypatch):
    for name in ('SEED_CONFIG', 'NETWORK', 'MONGO_URL', 'DB_NAME', 'MONGO_TIMEOUT_MS', 'LOG_LEVEL', 'TOMO_DEX_PATH'):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)


@fixture
def configuration(clean_env) -> Config:  # pylint: disable=unused-argument
    return get_config(network=test_config.network, mongo_url=test_config.mongo_url,
                      db_name=test_config.db_name, mongo_timeout_ms=500)


@fixture
def tables() -> TokenTables:
    return TokenTables(quote_tokens=list(test_config.quote_tokens),
                       base_tokens=list(test_config.base_tokens),
                       decimals=dict(test_config.decimals),
                       make_fees=dict(test_config.make_fees),
                       take_fees=dict(test_config.take_fees),
                       contract_addresses={test_config.network_id: dict(test_config.addresses)})
