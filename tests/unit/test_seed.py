import pytest

from quote_seeder.db import Token
from quote_seeder.seed_quotes import main, seed_tokens
from quote_seeder.util.exceptions import ConfigurationError, ConnectivityError, MissingTokenEntry, \
    UnknownNetwork, WriteError
from tests import config as test_config


def test_seed(store, configuration, tables):
    """Every quote token is written in a single batch over a single connection"""
    result = seed_tokens(configuration, tables)

    assert result.ok
    assert result.network_id == test_config.network_id
    assert result.requested == result.inserted == len(test_config.quote_tokens)

    assert len(store.connects) == 1
    assert store.connects[0]['db'] == test_config.db_name
    assert store.connects[0]['host'] == test_config.mongo_url
    assert store.connects[0]['serverSelectionTimeoutMS'] == 500
    assert store.disconnects == 1

    assert len(store.batches) == 1
    assert [doc.symbol for doc in store.documents] == test_config.quote_tokens
    assert all(doc.quote for doc in store.documents)


def test_seed_with_base_tokens(store, configuration, tables):
    result = seed_tokens(configuration, tables, include_base=True)

    assert result.ok
    assert result.inserted == len(test_config.quote_tokens) + len(test_config.base_tokens)
    assert [doc.symbol for doc in store.documents] == test_config.quote_tokens + test_config.base_tokens
    assert [doc.quote for doc in store.documents] == [True, True, True, False]
    assert len({doc.created_at for doc in store.documents}) == 1


def test_seed_is_not_idempotent(store, configuration, tables):
    """Seeding twice stores every token twice"""
    first = seed_tokens(configuration, tables)
    second = seed_tokens(configuration, tables)

    assert first.ok and second.ok
    assert len(store.batches) == 2
    assert len(store.documents) == 2 * len(test_config.quote_tokens)
    assert store.disconnects == 2


def test_missing_address_fails_before_write(store, configuration, tables):
    del tables.contract_addresses[test_config.network_id]["DEF"]

    result = seed_tokens(configuration, tables)

    assert not result.ok
    assert isinstance(result.error, MissingTokenEntry)
    assert result.error.symbol == "DEF"
    assert result.inserted == 0
    assert store.connects == []
    assert store.batches == []


def test_network_without_addresses(store, configuration, tables):
    configuration.network = "mainnet"

    result = seed_tokens(configuration, tables)

    assert isinstance(result.error, MissingTokenEntry)
    assert result.error.table == "address"
    assert store.connects == []


def test_unknown_network(store, configuration, tables):
    configuration.network = "ropsten"

    result = seed_tokens(configuration, tables)

    assert isinstance(result.error, UnknownNetwork)
    assert result.network_id is None
    assert store.connects == []


def test_connection_failure_releases_once(store, configuration, tables):
    store.unreachable = True

    result = seed_tokens(configuration, tables)

    assert isinstance(result.error, ConnectivityError)
    assert result.inserted == 0
    assert store.batches == []
    assert store.disconnects == 1


def test_write_failure_releases_once(store, configuration, tables):
    store.reject_writes = True

    result = seed_tokens(configuration, tables)

    assert isinstance(result.error, WriteError)
    assert result.requested == len(test_config.quote_tokens)
    assert result.inserted == 0
    assert store.disconnects == 1


def test_interrupt_releases_once(store, configuration, tables, monkeypatch):
    def interrupted(documents):
        raise KeyboardInterrupt

    monkeypatch.setattr(Token, 'insert_many', interrupted)

    with pytest.raises(KeyboardInterrupt):
        seed_tokens(configuration, tables)

    assert store.disconnects == 1


def test_dry_run_does_not_connect(store, configuration, tables):
    result = seed_tokens(configuration, tables, dry_run=True)

    assert result.ok
    assert result.requested == len(test_config.quote_tokens)
    assert result.inserted == 0
    assert store.connects == []


def test_missing_mongo_url(store, configuration, tables):
    configuration.mongo_url = None

    result = seed_tokens(configuration, tables)

    assert isinstance(result.error, ConfigurationError)
    assert store.connects == []


def test_main(store, clean_env):  # pylint: disable=unused-argument
    exit_code = main(['--network=development', f'--mongo_url={test_config.mongo_url}',
                      f'--db_name={test_config.db_name}'])

    assert exit_code == 0
    assert len(store.batches) == 1
    assert store.disconnects == 1


def test_main_dry_run_without_mongo_url(store, clean_env):  # pylint: disable=unused-argument
    assert main(['--network', 'testnet', '--dry-run']) == 0
    assert store.connects == []


def test_main_unreachable_store(store, clean_env):  # pylint: disable=unused-argument
    store.unreachable = True

    assert main(['--network=development', f'--mongo-url={test_config.mongo_url}']) == 1
    assert store.batches == []


def test_main_unknown_network(store, clean_env):  # pylint: disable=unused-argument
    assert main(['--network=ropsten', f'--mongo_url={test_config.mongo_url}']) == 1
    assert store.connects == []


def test_main_missing_network(store, clean_env):  # pylint: disable=unused-argument
    assert main([f'--mongo_url={test_config.mongo_url}']) == 1
    assert store.connects == []


def test_main_malformed_mongo_url(clean_env):  # pylint: disable=unused-argument
    assert main(['--network=development', '--mongo_url=mongodb://localhost:notaport']) == 1


def test_main_invalid_log_level(store, clean_env):  # pylint: disable=unused-argument
    assert main(['--network=development', '--dry-run', '--log_level=foo']) == 1
