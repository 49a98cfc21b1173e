# gpc/core/config/network_config.py

import os
import logging
from dataclasses import dataclass
from typing import Dict, Any, Tuple, Union

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CoinNetwork:
    """
    Parámetros de direcciones de una red concreta.
    Los bytes de versión deciden qué variante de destino representa una dirección.
    """
    name: str
    pubkey_hash_versions: Tuple[int, ...]
    script_hash_versions: Tuple[int, ...]
    bech32_hrp: str = ""


class NetworkConfig:
    """
    Selección de la red del coin (mainnet, testnet...).
    Aisla los prefijos de direcciones de la lógica de construcción.
    """

    NETWORKS: Dict[str, CoinNetwork] = {
        "bitcoin": CoinNetwork("bitcoin", (0x00,), (0x05,), "bc"),
        "testnet": CoinNetwork("testnet", (0x6f,), (0xc4,), "tb"),
        "regtest": CoinNetwork("regtest", (0x6f,), (0xc4,), "bcrt"),
        # Litecoin mantiene el prefijo P2SH legado (0x05) además del nuevo (0x32)
        "litecoin": CoinNetwork("litecoin", (0x30,), (0x32, 0x05), "ltc"),
    }

    def __init__(self) -> None:
        self._network: CoinNetwork = self._resolve(os.getenv("GPC_NETWORK", "bitcoin"))

    @staticmethod
    def _resolve(name: str) -> CoinNetwork:
        key = name.strip().lower()
        if key not in NetworkConfig.NETWORKS:
            raise ValueError(f"Red desconocida: '{name}'. Opciones: {sorted(NetworkConfig.NETWORKS)}")
        return NetworkConfig.NETWORKS[key]

    # --- Getters Públicos (Solo Lectura) ---
    @property
    def network(self) -> CoinNetwork: return self._network
    @property
    def name(self) -> str: return self._network.name

    # --- Método de Actualización Controlada ---
    def update_from_dict(self, data: Union[str, Dict[str, Any]]) -> None:
        """Acepta {"name": "testnet"} o directamente el nombre como string."""
        if not data: return

        name = data if isinstance(data, str) else data.get("name", "")
        if name:
            self._network = self._resolve(str(name))
            logger.info(f"Red seleccionada: {self._network.name}")
