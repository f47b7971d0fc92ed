from datetime import datetime
from typing import Dict, List, Mapping, Sequence

from mongoengine import ValidationError

from quote_seeder.db.collections.token import Token, utc_now
from quote_seeder.util.exceptions import ConfigurationError, InvalidAddress, MissingTokenEntry
from quote_seeder.util.web3 import normalize_address


def _lookup(table: Mapping, table_name: str, symbol: str):
    try:
        value = table[symbol]
    except KeyError:
        raise MissingTokenEntry(symbol, table_name) from None
    if value is None:
        raise MissingTokenEntry(symbol, table_name)
    return value


def _contract_address(addresses: Mapping[str, str], symbol: str) -> str:
    address = _lookup(addresses, 'address', symbol)
    try:
        return normalize_address(address)
    except ValueError:
        raise InvalidAddress(symbol, address) from None


def _validated(documents: List[Token]) -> List[Token]:
    for doc in documents:
        try:
            doc.validate()
        except ValidationError as e:
            raise ConfigurationError(f'Token {doc.symbol!r} is malformed: {e}') from e
    return documents


def build_quote_documents(symbols: Sequence[str], addresses: Mapping[str, str], decimals: Mapping[str, int],
                          make_fees: Mapping[str, float], take_fees: Mapping[str, float],
                          now: datetime = None) -> List[Token]:
    """
    Creates one quote token document per symbol, preserving the order of `symbols`

    Every symbol must be present in all the tables, otherwise MissingTokenEntry is raised
    and nothing is returned. All documents share the same creation timestamp.

    :param symbols: quote token symbols
    :param addresses: symbol -> contract address, for the network being seeded
    :param decimals: symbol -> token decimals
    :param make_fees: symbol -> maker fee
    :param take_fees: symbol -> taker fee
    :param now: creation timestamp, defaults to the current UTC time
    """
    now = now or utc_now()
    documents = [Token(symbol=symbol,
                       contract_address=_contract_address(addresses, symbol),
                       decimals=_lookup(decimals, 'decimals', symbol),
                       make_fee=_lookup(make_fees, 'makeFee', symbol),
                       take_fee=_lookup(take_fees, 'takeFee', symbol),
                       quote=True,
                       created_at=now,
                       updated_at=now)
                 for symbol in symbols]
    return _validated(documents)


def build_base_documents(symbols: Sequence[str], addresses: Mapping[str, str], decimals: Dict[str, int],
                         now: datetime = None) -> List[Token]:
    """Same as build_quote_documents for base tokens, which carry no fees"""
    now = now or utc_now()
    documents = [Token(symbol=symbol,
                       contract_address=_contract_address(addresses, symbol),
                       decimals=_lookup(decimals, 'decimals', symbol),
                       quote=False,
                       created_at=now,
                       updated_at=now)
                 for symbol in symbols]
    return _validated(documents)
