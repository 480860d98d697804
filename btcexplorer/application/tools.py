from datetime import datetime
from decimal import Decimal

_EPOCH = datetime(1970, 1, 1)


def btc_to_satoshi(value) -> int:
    return int(Decimal(str(value)) * 10**8)


def iso_to_epoch(value: str):
    if not value:
        return None
    utc_time = datetime.strptime(value.split('.')[0].rstrip('Z'), "%Y-%m-%dT%H:%M:%S")
    return int((utc_time - _EPOCH).total_seconds())


def normalize_hex(value):
    return value and value.replace('\n', '').replace(' ', '').lower()
