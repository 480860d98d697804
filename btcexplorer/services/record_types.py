from dataclasses import dataclass, field

import typing


@dataclass
class BTCAddress:
    address: str
    balance: int
    total_received: typing.Optional[int] = None
    total_sent: typing.Optional[int] = None
    transaction_count: typing.Optional[int] = None
    txids: typing.List[str] = field(default_factory=list)
    source: typing.Optional[str] = None


@dataclass
class BTCTxOut:
    value_satoshi: int
    script_hex: typing.Optional[str] = None
    addresses: typing.List[str] = field(default_factory=list)
    spent: typing.Optional[bool] = None


@dataclass
class BTCTransaction:
    txid: str
    blockhash: typing.Optional[str] = None
    blockheight: typing.Optional[int] = None
    confirmations: typing.Optional[int] = None
    fee: typing.Optional[int] = None
    size: typing.Optional[int] = None
    time: typing.Optional[int] = None
    rawtx: typing.Optional[str] = None
    outputs: typing.List[BTCTxOut] = field(default_factory=list)
    source: typing.Optional[str] = None

    @property
    def confirmed(self):
        return self.blockhash is not None
