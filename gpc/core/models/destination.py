# gpc/core/models/destination.py
'''
Variantes cerradas de destino de pago (unión etiquetada).

    PubKeyHash:     Base58Check con versión P2PKH  -> hash160 de la clave pública.
    ScriptHash:     Base58Check con versión P2SH   -> hash160 del script de canje.
    WitnessProgram: Bech32 (SegWit v0)             -> programa de 20 o 32 bytes.
'''

from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class PubKeyHash:
    hash160: bytes

@dataclass(frozen=True)
class ScriptHash:
    hash160: bytes

@dataclass(frozen=True)
class WitnessProgram:
    version: int
    program: bytes

Destination = Union[PubKeyHash, ScriptHash, WitnessProgram]
