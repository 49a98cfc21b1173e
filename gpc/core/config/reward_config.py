# gpc/core/config/reward_config.py

import os
import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Sequence

from gpc.core.exceptions import InvalidRecipientShare
from gpc.core.utils.monetary import Monetary, PercentInput

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RewardRecipient:
    address: str
    share_percent: PercentInput

    @property
    def share_units(self) -> int:
        return Monetary.percent_to_units(self.share_percent)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'RewardRecipient':
        if "address" not in data or "sharePercent" not in data:
            raise InvalidRecipientShare(f"Receptor incompleto (se requieren 'address' y 'sharePercent'): {data}")
        return RewardRecipient(address=str(data["address"]), share_percent=data["sharePercent"])


class RewardConfig:
    """
    Reparto de la recompensa: receptores de comisión + billetera del pool (resto).
    Los porcentajes se validan al cargar; una configuración inválida nunca llega a un build.
    """

    def __init__(self) -> None:
        self._pool_wallet_address: str = os.getenv("GPC_POOL_WALLET", "")
        self._recipients: List[RewardRecipient] = []

    @staticmethod
    def validate_shares(recipients: Sequence[RewardRecipient]) -> List[int]:
        """
        Cada porcentaje debe estar en (0, 100] y la suma debe ser < 100
        (el pool siempre recibe algo). Retorna las unidades escaladas en orden.
        """
        units: List[int] = []
        for recipient in recipients:
            share = recipient.share_units
            if share <= 0 or share > Monetary.FULL_PERCENT_UNITS:
                raise InvalidRecipientShare(
                    f"Porcentaje fuera de (0, 100] para {recipient.address}: {recipient.share_percent}"
                )
            units.append(share)

        if sum(units) >= Monetary.FULL_PERCENT_UNITS:
            raise InvalidRecipientShare(
                f"La suma de porcentajes ({sum(units) / Monetary.PERCENT_SCALE}%) no deja resto para el pool."
            )
        return units

    # --- Getters ---
    @property
    def pool_wallet_address(self) -> str: return self._pool_wallet_address
    @property
    def recipients(self) -> List[RewardRecipient]: return self._recipients[:]

    def set_recipients(self, recipients: Sequence[RewardRecipient]) -> None:
        RewardConfig.validate_shares(recipients)
        self._recipients = list(recipients)

    def update_from_dict(self, pool_data: Dict[str, Any], recipients_data: List[Dict[str, Any]]) -> None:
        if pool_data and "poolWalletAddress" in pool_data:
            self._pool_wallet_address = str(pool_data["poolWalletAddress"])

        if recipients_data is not None:
            self.set_recipients([RewardRecipient.from_dict(item) for item in recipients_data])
            logger.info(f"Receptores de recompensa cargados: {len(self._recipients)}")
