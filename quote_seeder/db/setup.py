from contextlib import contextmanager

import mongoengine
from mongoengine.connection import ConnectionFailure as ClientCreationFailure
from pymongo.errors import ConfigurationError as MongoConfigurationError, ConnectionFailure, OperationFailure

from quote_seeder.util.exceptions import ConfigurationError, ConnectivityError
from quote_seeder.util.logger import get_logger

logger = get_logger('db')


@contextmanager
def database(uri: str, db_name: str, timeout_ms: int = 10000):
    """
    Scoped connection to the store, released exactly once on every exit path

    Reachability is checked eagerly so that an unreachable store fails here,
    before anything is written.
    """
    try:
        try:
            connection = mongoengine.connect(db=db_name, host=uri,
                                             serverSelectionTimeoutMS=timeout_ms,
                                             connectTimeoutMS=timeout_ms,
                                             socketTimeoutMS=timeout_ms)
        except (MongoConfigurationError, ValueError) as e:
            raise ConfigurationError(f'Invalid mongo url: {e}') from e
        except ClientCreationFailure as e:
            raise ConnectivityError(str(e)) from e

        try:
            connection.server_info()
        except (ConnectionFailure, OperationFailure) as e:
            raise ConnectivityError(f'Cannot reach database {db_name!r}: {e}') from e

        logger.debug(f'Connected to database {db_name!r}')
        yield connection
    finally:
        mongoengine.disconnect()
