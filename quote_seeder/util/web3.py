from web3 import Web3


def normalize_address(address: str) -> str:
    """Converts address to its checksummed form, acceptable by web3

    All lower or all upper case hex is checksummed. Mixed case is taken as an
    already checksummed address and must pass the checksum.
    Raises ValueError if the address is not a 20 byte hex string or fails its checksum.
    """
    if not isinstance(address, str):
        raise ValueError(f'Address must be a string, got {type(address).__name__}')

    digits = address[2:] if address[:2] in ('0x', '0X') else address
    if digits != digits.lower() and digits != digits.upper() and not Web3.is_checksum_address(address):
        raise ValueError(f'Address {address!r} has an invalid checksum')
    return Web3.to_checksum_address(address.lower())
