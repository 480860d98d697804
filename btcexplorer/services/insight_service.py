from typing import Dict

from btcexplorer.application import exceptions, settings
from btcexplorer.application.abstracts import RecordDeserializer
from btcexplorer.application.tools import btc_to_satoshi
from btcexplorer.services.rate_limited_explorer import ExplorerVariant
from btcexplorer.services.record_types import BTCAddress, BTCTransaction, BTCTxOut


class InsightAddressDeserializer(RecordDeserializer):
    def deserialize(self, data: Dict):
        # "txApperances" is how insight spells it
        return BTCAddress(
            address=data['addrStr'],
            balance=int(data['balanceSat']),
            total_received=int(data['totalReceivedSat']),
            total_sent=int(data['totalSentSat']),
            transaction_count=int(data['txApperances']) + int(data.get('unconfirmedTxApperances', 0)),
            txids=list(data.get('transactions', [])),
            source='insight'
        )


class InsightTransactionDeserializer(RecordDeserializer):
    @staticmethod
    def _format_txout(vout: Dict):
        return BTCTxOut(
            value_satoshi=btc_to_satoshi(vout['value']),
            script_hex=vout['scriptPubKey']['hex'],
            addresses=vout['scriptPubKey'].get('addresses', []),
            spent=bool(vout.get('spentTxId'))
        )

    def deserialize(self, data: Dict):
        blockheight = data.get('blockheight')
        fees = data.get('fees')
        return BTCTransaction(
            txid=data['txid'],
            blockhash=data.get('blockhash'),
            blockheight=blockheight if blockheight is not None and blockheight >= 0 else None,
            confirmations=data.get('confirmations', 0),
            fee=btc_to_satoshi(fees) if fees is not None else None,
            size=data.get('size'),
            time=data.get('blocktime') or data.get('time'),
            rawtx=None,
            outputs=[self._format_txout(vout) for vout in data.get('vout', [])],
            source='insight'
        )


def variant(coin=settings.NETWORK):
    if coin != settings.Network.BITCOIN:
        raise exceptions.ConfigurationException('insight does not support %s' % coin)
    return ExplorerVariant(
        name='insight',
        baseurl='https://insight.bitpay.com/api/',
        address_path='addr/{address}',
        transaction_path='tx/{txid}',
        create_address_deserializer=InsightAddressDeserializer,
        create_transaction_deserializer=InsightTransactionDeserializer,
        duration_per_call=settings.INSIGHT_DURATION_PER_CALL,
        throttling_error_codes=(429, )
    )
