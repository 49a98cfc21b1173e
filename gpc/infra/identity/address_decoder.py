# gpc/infra/identity/address_decoder.py

import logging
import base58
from bech32 import decode as bech32_decode_segwit

from gpc.core.config.network_config import CoinNetwork
from gpc.core.exceptions import InvalidAddress
from gpc.core.models.destination import Destination, PubKeyHash, ScriptHash, WitnessProgram

logger = logging.getLogger(__name__)

class AddressDecoder:
    """
    Traduce una dirección de la red activa a su variante de destino.
    La variante se decide por el byte de versión (Base58Check) o por el HRP (Bech32).
    """

    HASH160_SIZE = 20
    WITNESS_PROGRAM_SIZES = (20, 32)

    def __init__(self, network: CoinNetwork) -> None:
        self._network = network

    @property
    def network(self) -> CoinNetwork: return self._network

    def decode(self, address: str) -> Destination:
        if not address or not isinstance(address, str):
            raise InvalidAddress(str(address), "dirección vacía")

        hrp = self._network.bech32_hrp
        if hrp and address.lower().startswith(hrp + "1"):
            return self._decode_bech32(address)

        return self._decode_base58(address)

    def _decode_base58(self, address: str) -> Destination:
        try:
            raw: bytes = base58.b58decode_check(address)
        except ValueError as e:
            raise InvalidAddress(address, f"checksum Base58 inválido ({e})") from e

        if len(raw) != 1 + self.HASH160_SIZE:
            raise InvalidAddress(address, f"longitud de payload inesperada: {len(raw)}")

        version, payload = raw[0], raw[1:]

        if version in self._network.pubkey_hash_versions:
            return PubKeyHash(payload)
        if version in self._network.script_hash_versions:
            return ScriptHash(payload)

        raise InvalidAddress(address, f"versión {version:#04x} no pertenece a la red '{self._network.name}'")

    def _decode_bech32(self, address: str) -> Destination:
        witness_version, program = bech32_decode_segwit(self._network.bech32_hrp, address)

        if witness_version is None or program is None:
            raise InvalidAddress(address, "checksum Bech32 inválido")

        # Solo SegWit v0 (P2WPKH / P2WSH)
        if witness_version != 0 or len(program) not in self.WITNESS_PROGRAM_SIZES:
            raise InvalidAddress(address, f"programa witness no soportado (v{witness_version}, {len(program)} bytes)")

        return WitnessProgram(witness_version, bytes(program))
