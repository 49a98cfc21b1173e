# gpc/tests/unit/test_config_manager.py
'''
Test Suite para ConfigManager:
    Verifica la carga de las secciones JSON (red, pool, extra-nonce, recompensas)
    y el rechazo de redes desconocidas o porcentajes inválidos al cargar.
'''

import sys
import os
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from gpc.core.config.config_manager import ConfigManager
from gpc.core.exceptions import EncodingOverflow, InvalidRecipientShare

class TestConfigManager(unittest.TestCase):

    def setUp(self):
        setattr(ConfigManager, "_instance", None)

    def tearDown(self):
        setattr(ConfigManager, "_instance", None)

    def test_singleton(self):
        self.assertIs(ConfigManager(), ConfigManager())

    def test_load_sections(self):
        print("\n>> Ejecutando: test_load_sections...")

        config = ConfigManager()
        config.load_from_json_dict({
            "network": "testnet",
            "pool": {
                "poolWalletAddress": "POOL",
                "poolTag": "/test/",
                "supportTransactionMessages": True,
                "transactionMessage": "hola"
            },
            "extraNonce": {"extranonce1Size": 4, "extranonce2Size": 8, "instanceId": 2},
            "rewardRecipients": [{"address": "FEE", "sharePercent": 2.5}]
        })

        self.assertEqual(config.network.name, "testnet")
        self.assertEqual(config.network.network.pubkey_hash_versions, (0x6f,))
        self.assertEqual(config.pool.pool_tag, "/test/")
        self.assertTrue(config.pool.support_tx_messages)
        self.assertEqual(config.pool.tx_message, "hola")
        self.assertEqual(config.pool.extranonce2_size, 8)
        self.assertEqual(config.pool.instance_id, 2)
        self.assertEqual(config.rewards.pool_wallet_address, "POOL")
        self.assertEqual(config.rewards.recipients[0].share_units, 2_500_000)

        print("[SUCCESS] Configuración cargada.")

    def test_network_by_dict(self):
        config = ConfigManager()
        config.load_from_json_dict({"network": {"name": "litecoin"}})
        self.assertEqual(config.network.network.bech32_hrp, "ltc")

    def test_non_ascii_tag_rejected_at_load(self):
        config = ConfigManager()
        tag_before = config.pool.pool_tag
        with self.assertRaises(EncodingOverflow):
            config.load_from_json_dict({"pool": {"poolTag": "/piscina-ñ/"}})
        with self.assertRaises(EncodingOverflow):
            config.load_from_json_dict({"pool": {"transactionMessage": "minado en España"}})

        self.assertEqual(config.pool.pool_tag, tag_before)

    def test_unknown_network(self):
        with self.assertRaises(ValueError):
            ConfigManager().load_from_json_dict({"network": "dogecoin-classic"})

    def test_invalid_shares_fail_at_load(self):
        with self.assertRaises(InvalidRecipientShare):
            ConfigManager().load_from_json_dict({
                "rewardRecipients": [{"address": "A", "sharePercent": 50}, {"address": "B", "sharePercent": 50}]
            })

if __name__ == "__main__":
    unittest.main()
