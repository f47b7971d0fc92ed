from dataclasses import dataclass, field
from typing import Dict, List

from quote_seeder.util.networks import DEVELOPMENT, MAINNET, TESTNET

QUOTE_TOKENS = ['TOMO', 'BTC', 'ETH', 'USDT']

BASE_TOKENS = ['XRP', 'LTC', 'BNB', 'ADA', 'ETC', 'BCH', 'EOS']

DECIMALS = {
    'TOMO': 18,
    'BTC': 8,
    'ETH': 18,
    'USDT': 6,
    'XRP': 6,
    'LTC': 8,
    'BNB': 18,
    'ADA': 6,
    'ETC': 18,
    'BCH': 8,
    'EOS': 4,
}

# fees are expressed as a fraction of the traded amount
MAKE_FEES = {
    'TOMO': 0.001,
    'BTC': 0.001,
    'ETH': 0.001,
    'USDT': 0.001,
}

TAKE_FEES = {
    'TOMO': 0.002,
    'BTC': 0.002,
    'ETH': 0.002,
    'USDT': 0.002,
}

CONTRACT_ADDRESSES: Dict[str, Dict[str, str]] = {
    DEVELOPMENT: {
        'TOMO': '0x0000000000000000000000000000000000000001',
        'BTC': '0x4d7ea2ce949216d6b120f3aa10164173615a2b6c',
        'ETH': '0x6f8d1e7c0b9f1f9e5e4de2e1b2d2a2cf4a8b0a31',
        'USDT': '0x45c25041b8e6cbd5c963e7943007187c3673c7c9',
        'XRP': '0x2f3a8e4d2b6e1e3c9d8f0e7a6b5c4d3e2f1a0b9c',
        'LTC': '0x8e97d66a1b8e7ee8c3c46c3e8c9f5a0b2d1c0e3f',
        'BNB': '0x3c5e8d0f6b7a9e1d2c4f5a6b7c8d9e0f1a2b3c4d',
        'ADA': '0x9a8b7c6d5e4f3a2b1c0d9e8f7a6b5c4d3e2f1a0b',
        'ETC': '0x1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8a9b0c',
        'BCH': '0x5f4e3d2c1b0a9f8e7d6c5b4a3f2e1d0c9b8a7f6e',
        'EOS': '0x7e6d5c4b3a2f1e0d9c8b7a6f5e4d3c2b1a0f9e8d',
    },
    TESTNET: {
        'TOMO': '0x0000000000000000000000000000000000000001',
        'BTC': '0xc2fa1bed3b0fc2a3d5f5cf1c5cd1f0c3b7a6e1d2',
        'ETH': '0x2eaa73bd0db20c64f53febea7b5f5e5bccc7fb8b',
        'USDT': '0xf4fd1bc4c5c1d1e7a8a9d8d3b1e8e1c7d3a1f2b4',
        'XRP': '0x0d6a7b9c3e5f1a2b4c6d8e0f1a3b5c7d9e1f3a5b',
        'LTC': '0x6c8e0a2b4d6f8a0c2e4a6c8e0b2d4f6a8c0e2a4c',
        'BNB': '0x4a6c8e0b2d4f6a8c0e2a4c6e8a0c2e4b6d8f0a2c',
        'ADA': '0x8f0a2c4e6b8d0f2a4c6e8b0d2f4a6c8e0b2d4f6a',
        'ETC': '0x2c4e6a8c0e2b4d6f8a0c2e4a6c8e0b2d4f6a8c0e',
        'BCH': '0x0e2a4c6e8b0d2f4a6c8e0a2c4e6b8d0f2a4c6e8b',
        'EOS': '0xa4c6e8b0d2f4a6c8e0b2d4f6a8c0e2a4c6e8b0d2',
    },
    MAINNET: {
        'TOMO': '0x0000000000000000000000000000000000000001',
        'BTC': '0xae44807d8a9ce4b30146437474a4e3d23a1a6ff8',
        'ETH': '0x2eaa73bd0db20c64f53febea7b5f5e5bccc7fb8b',
        'USDT': '0x381b31409e4d220919b2cff012ed94d70135a59e',
        'XRP': '0x0daf6d0b7cd4d1a7e4d2c3ab2b9e2e0a1b3c5d7e',
        'LTC': '0xa8a3d1c8e4b8b7e6d5c4b3a2f1e0d9c8b7a6f5e4',
        'BNB': '0xd9bb01454c85247b2ef35bb5be57384cc275a8cf',
        'ADA': '0x6e6f7c8a9b0c1d2e3f4a5b6c7d8e9f0a1b2c3d4e',
        'ETC': '0xb7c8d9e0f1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6',
        'BCH': '0xc8d9e0f1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7',
        'EOS': '0xd9e0f1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8',
    },
}


@dataclass
class TokenTables:
    quote_tokens: List[str]
    base_tokens: List[str]
    decimals: Dict[str, int]
    make_fees: Dict[str, float]
    take_fees: Dict[str, float]
    contract_addresses: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def addresses(self, network_id: str) -> Dict[str, str]:
        """Address table of a network, empty if the network has no deployment"""
        return self.contract_addresses.get(network_id, {})


DEFAULT_TABLES = TokenTables(quote_tokens=QUOTE_TOKENS,
                             base_tokens=BASE_TOKENS,
                             decimals=DECIMALS,
                             make_fees=MAKE_FEES,
                             take_fees=TAKE_FEES,
                             contract_addresses=CONTRACT_ADDRESSES)
