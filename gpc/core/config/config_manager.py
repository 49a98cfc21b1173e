# gpc/core/config/config_manager.py
'''
class ConfigManager:
    Orquesta y centraliza el acceso a la configuración de todos los módulos (Red, Pool y Recompensas),
    cargando valores desde el entorno (.env) o JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza todas las sub-configuraciones
            a partir de un diccionario JSON completo.
'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

# Importar piezas de configuración
from gpc.core.config.network_config import NetworkConfig
from gpc.core.config.pool_config import PoolConfig
from gpc.core.config.reward_config import RewardConfig

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._network = NetworkConfig()   # Prefijos de direcciones
        self._pool = PoolConfig()         # Etiqueta, mensajes, extra-nonce
        self._rewards = RewardConfig()    # Receptores y billetera del pool

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        # Red
        if "network" in json_data:
            self._network.update_from_dict(json_data["network"])

        # Pool (Combinamos secciones 'pool' y 'extraNonce')
        pool_updates: dict[str, Any] = {}
        if "pool" in json_data:
            pool_updates.update(json_data["pool"])
        if "extraNonce" in json_data:
            pool_updates.update(json_data["extraNonce"])

        self._pool.update_from_dict(pool_updates)

        # Recompensas (InvalidRecipientShare se propaga: fallo en carga, nunca en un build)
        self._rewards.update_from_dict(json_data.get("pool", {}), json_data.get("rewardRecipients"))

    # --- ACCESORES ORGANIZADOS ---

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def pool(self) -> PoolConfig:
        return self._pool

    @property
    def rewards(self) -> RewardConfig:
        return self._rewards
