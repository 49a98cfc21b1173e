# gpc/core/services/transaction_hasher.py

import logging
from typing import Union

from gpc.core.utils.crypto_utility import CryptoUtility

logger = logging.getLogger(__name__)

class TransactionHasher:

    @staticmethod
    def calculate(raw_transaction: Union[str, bytes]) -> str:
        """
        TXID de una transacción serializada: Doble SHA-256 mostrado en big-endian
        (orden que usan exploradores y RPC).
        """
        digest = CryptoUtility.double_sha256(raw_transaction)
        return digest[::-1].hex()
