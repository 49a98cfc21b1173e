# gpc/tests/unit/test_reward_distributor.py
'''
Test Suite para RewardDistributor:
    Verifica el reparto entero (sin coma flotante) de la recompensa, el redondeo
    hacia abajo a favor del pool y el rechazo de porcentajes mal configurados.
'''

import sys
import os
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from gpc.core.config.reward_config import RewardConfig, RewardRecipient
from gpc.core.exceptions import EncodingOverflow, InvalidRecipientShare
from gpc.core.services.reward_distributor import RewardDistributor, RewardShare
from gpc.core.utils.monetary import Monetary

POOL = "POOL_WALLET"

class TestRewardDistributor(unittest.TestCase):

    def test_single_fee_recipient(self):
        print("\n>> Ejecutando: test_single_fee_recipient...")

        shares = RewardDistributor.distribute(5_000_000_000, [RewardRecipient("FEE", 1)], POOL)

        self.assertEqual(shares, [
            RewardShare("FEE", 50_000_000),
            RewardShare(POOL, 4_950_000_000),
        ])
        print("[SUCCESS] 1% de comisión repartido.")

    def test_rounding_remainder_goes_to_pool(self):
        shares = RewardDistributor.distribute(999, [RewardRecipient("FEE", 1)], POOL)
        self.assertEqual([s.amount for s in shares], [9, 990])

    def test_recipients_applied_sequentially_over_remaining(self):
        recipients = [RewardRecipient("A", 10), RewardRecipient("B", "10")]
        shares = RewardDistributor.distribute(1000, recipients, POOL)

        self.assertEqual([(s.address, s.amount) for s in shares], [("A", 100), ("B", 90), (POOL, 810)])

    def test_sum_is_always_exact(self):
        print("\n>> Ejecutando: test_sum_is_always_exact...")

        recipient_sets = [
            [],
            [RewardRecipient("A", 0.5)],
            [RewardRecipient("A", 33.333333), RewardRecipient("B", 0.000001), RewardRecipient("C", 66.5)],
            [RewardRecipient(f"R{i}", 9.9) for i in range(10)],
        ]
        totals = [0, 1, 7, 99, 1_250_000_000, 12_345_678_901, 2 ** 64 - 1]

        for recipients in recipient_sets:
            for total in totals:
                shares = RewardDistributor.distribute(total, recipients, POOL)
                self.assertEqual(sum(s.amount for s in shares), total)
                self.assertEqual(len(shares), len(recipients) + 1)
                self.assertEqual(shares[-1].address, POOL)
                self.assertTrue(all(s.amount >= 0 for s in shares))

        print("[SUCCESS] Sin fugas ni excesos en ningún caso.")

    def test_invalid_percentages(self):
        invalid_sets = [
            [RewardRecipient("A", 0)],
            [RewardRecipient("A", -1)],
            [RewardRecipient("A", 101)],
            [RewardRecipient("A", 100)],
            [RewardRecipient("A", 60), RewardRecipient("B", 40)],
            [RewardRecipient("A", "abc")],
            [RewardRecipient("A", 0.0000001)],
            [RewardRecipient("A", float("nan"))],
        ]
        for recipients in invalid_sets:
            with self.assertRaises(InvalidRecipientShare, msg=str(recipients)):
                RewardDistributor.distribute(1000, recipients, POOL)

    def test_reward_outside_u64(self):
        with self.assertRaises(EncodingOverflow):
            RewardDistributor.distribute(2 ** 64, [], POOL)
        with self.assertRaises(EncodingOverflow):
            RewardDistributor.distribute(-1, [], POOL)

    def test_float_reward_rejected(self):
        with self.assertRaises(TypeError):
            RewardDistributor.distribute(50.0, [], POOL)  # type: ignore

class TestPercentUnits(unittest.TestCase):

    def test_exact_scaling(self):
        self.assertEqual(Monetary.percent_to_units("1"), 1_000_000)
        self.assertEqual(Monetary.percent_to_units(2.5), 2_500_000)
        self.assertEqual(Monetary.percent_to_units("0.000001"), 1)
        self.assertEqual(Monetary.percent_to_units("1.500000000"), 1_500_000)

    def test_fraction_beyond_context_precision_rejected(self):
        # 29 dígitos significativos: el contexto de 28 redondearía a 1%
        with self.assertRaises(InvalidRecipientShare):
            Monetary.percent_to_units("1.0000000000000000000000000001")
        with self.assertRaises(InvalidRecipientShare):
            RewardConfig.validate_shares([RewardRecipient("A", "1.0000000000000000000000000001")])

    def test_extreme_exponents_rejected(self):
        with self.assertRaises(InvalidRecipientShare):
            Monetary.percent_to_units("1e-1000000")
        with self.assertRaises(InvalidRecipientShare):
            Monetary.percent_to_units("1e1000000")

class TestRewardConfig(unittest.TestCase):

    def test_load_validates_on_configuration(self):
        config = RewardConfig()
        config.update_from_dict(
            {"poolWalletAddress": "POOL"},
            [{"address": "A", "sharePercent": 1.5}, {"address": "B", "sharePercent": 2}]
        )

        self.assertEqual(config.pool_wallet_address, "POOL")
        self.assertEqual([r.address for r in config.recipients], ["A", "B"])

    def test_load_rejects_bad_shares(self):
        config = RewardConfig()
        with self.assertRaises(InvalidRecipientShare):
            config.update_from_dict({}, [{"address": "A", "sharePercent": 100}])
        with self.assertRaises(InvalidRecipientShare):
            config.update_from_dict({}, [{"address": "A"}])

        self.assertEqual(config.recipients, [])

if __name__ == "__main__":
    unittest.main()
