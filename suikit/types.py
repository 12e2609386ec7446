"""Shared constants and transaction parameters."""

from dataclasses import dataclass

TESTNET_ENDPOINT_URL = "https://fullnode.testnet.sui.io:443"
SUI_COIN_TYPE = "0x2::sui::SUI"
USD_COIN_TYPE = "0x2::usdc::USDC"


@dataclass(frozen=True)
class TxParams:
    """Everything needed to build, sign and submit a SUI transfer."""

    rpc_url: str = ""
    pk_hex: str = ""
    owner: str = ""
    recipient: str = ""
    amount: int = 0