import sys
from argparse import ArgumentParser
from dataclasses import dataclass
from typing import List, Optional

from quote_seeder.db import database, Token
from quote_seeder.documents import build_base_documents, build_quote_documents
from quote_seeder.tokens import DEFAULT_TABLES, TokenTables
from quote_seeder.util.config import Config, get_config
from quote_seeder.util.exceptions import ConfigurationError, SeedError
from quote_seeder.util.logger import get_logger
from quote_seeder.util.networks import get_network_id

logger = get_logger('seeder')


@dataclass
class SeedResult:
    network_id: Optional[str]
    requested: int = 0
    inserted: int = 0
    error: Optional[SeedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_documents(network_id: str, tables: TokenTables, include_base: bool = False) -> List[Token]:
    addresses = tables.addresses(network_id)
    documents = build_quote_documents(tables.quote_tokens, addresses, tables.decimals,
                                      tables.make_fees, tables.take_fees)
    if include_base:
        documents += build_base_documents(tables.base_tokens, addresses, tables.decimals,
                                          now=documents[0].created_at if documents else None)
    return documents


def seed_tokens(config: Config, tables: TokenTables = DEFAULT_TABLES, include_base: bool = False,
                dry_run: bool = False) -> SeedResult:
    """
    Builds the token documents of config.network and writes them to the tokens collection

    Documents are fully built before the store is contacted, so a configuration error never
    leaves partial data behind. Running twice inserts the tokens twice.
    """
    result = SeedResult(network_id=None)
    if config.tomo_dex_path:
        logger.debug(f'Build artifacts at {config.tomo_dex_path}')

    try:
        result.network_id = get_network_id(config.network)
        documents = build_documents(result.network_id, tables, include_base)
        result.requested = len(documents)
        logger.info(f'Built {result.requested} tokens for network {config.network} ({result.network_id})')

        if dry_run:
            for doc in documents:
                logger.info(f'{doc!r} decimals={doc.decimals} makeFee={doc.make_fee} takeFee={doc.take_fee}')
            return result

        if not config.mongo_url:
            raise ConfigurationError('Missing mongo_url, pass --mongo_url or set MONGO_URL')

        with database(config.mongo_url, config.db_name, config.mongo_timeout_ms):
            result.inserted = Token.insert_many(documents)
    except SeedError as e:
        logger.error(f'Seeding failed: {e}')
        result.error = e
        return result

    logger.info(f'Inserted {result.inserted} of {result.requested} tokens into {config.db_name}.tokens')
    return result


def parse_args(argv: List[str] = None):
    parser = ArgumentParser(description='Seed the tokens collection with the quote tokens of a network')
    parser.add_argument('--network', help='network name or id, selects the contract address table')
    parser.add_argument('--mongo_url', '--mongo-url', dest='mongo_url', help='mongodb connection string')
    parser.add_argument('--db_name', '--db-name', dest='db_name', help='database name (default: tomodex)')
    parser.add_argument('--timeout_ms', '--timeout-ms', dest='mongo_timeout_ms', type=int,
                        help='connect and write timeout in milliseconds')
    parser.add_argument('--config', dest='config_file', help='json configuration file')
    parser.add_argument('--log_level', '--log-level', dest='log_level')
    parser.add_argument('--base', action='store_true', help='seed base tokens as well')
    parser.add_argument('--dry-run', '--dry_run', dest='dry_run', action='store_true',
                        help='build and print the documents without writing them')
    return parser.parse_args(argv)


def main(argv: List[str] = None) -> int:
    args = parse_args(argv)
    try:
        config = get_config(args.config_file, network=args.network, mongo_url=args.mongo_url,
                            db_name=args.db_name, mongo_timeout_ms=args.mongo_timeout_ms,
                            log_level=args.log_level)
    except SeedError as e:
        logger.error(f'Bad configuration: {e}')
        return 1

    for name in ('seeder', 'db', 'config'):
        get_logger(name, loglevel=config.log_level)

    try:
        result = seed_tokens(config, include_base=args.base, dry_run=args.dry_run)
    except KeyboardInterrupt:
        logger.warning('Interrupted')
        return 130

    return 0 if result.ok else 1


if __name__ == '__main__':
    sys.exit(main())
