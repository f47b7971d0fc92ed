from typing import Dict

from quote_seeder.util.exceptions import UnknownNetwork

DEVELOPMENT = '8888'
TESTNET = '89'
MAINNET = '88'

NETWORK_IDS: Dict[str, str] = {
    'development': DEVELOPMENT,
    'local': DEVELOPMENT,
    'testnet': TESTNET,
    'tomochaintestnet': TESTNET,
    'mainnet': MAINNET,
    'tomochain': MAINNET,
}


def get_network_id(network: str) -> str:
    """
    Resolves a network name (case insensitive) or a known numeric id to the id
    used as key of the contract address tables
    """
    if network is None:
        raise UnknownNetwork('')

    name = str(network).strip()
    if name in NETWORK_IDS.values():
        return name

    try:
        return NETWORK_IDS[name.lower()]
    except KeyError:
        raise UnknownNetwork(name) from None
