# gpc/core/services/reward_distributor.py

import logging
from dataclasses import dataclass
from typing import List, Sequence

from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.config.reward_config import RewardConfig, RewardRecipient
from gpc.core.exceptions import EncodingOverflow
from gpc.core.utils.monetary import Monetary

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RewardShare:
    address: str
    amount: int

class RewardDistributor:

    @staticmethod
    def distribute(
        total_reward: int,
        recipients: Sequence[RewardRecipient],
        pool_wallet_address: str
    ) -> List[RewardShare]:
        """
        Reparte la recompensa en orden de configuración:
            amount = floor(restante * porcentaje / 100); restante -= amount
        El restante final va a la billetera del pool, así que la suma de
        montos es exactamente total_reward (el redondeo siempre favorece al pool).
        """
        if not isinstance(total_reward, int):
            raise TypeError(f"La recompensa debe ser entera. Recibido: {type(total_reward)}")
        if total_reward < 0 or total_reward > ProtocolConstants.MAX_U64:
            raise EncodingOverflow(f"Recompensa fuera de rango u64: {total_reward}")

        units = RewardConfig.validate_shares(recipients)

        remaining = total_reward
        shares: List[RewardShare] = []

        for recipient, share_units in zip(recipients, units):
            amount = Monetary.share_of(remaining, share_units)
            remaining -= amount
            shares.append(RewardShare(recipient.address, amount))

        shares.append(RewardShare(pool_wallet_address, remaining))

        logger.info(
            f"Recompensa repartida: {Monetary.to_coins(total_reward)} en {len(shares)} salidas "
            f"(pool: {Monetary.to_coins(remaining)})"
        )
        return shares
