# gpc/core/models/block_template.py
'''
Plantilla de bloque entregada por el daemon (getblocktemplate).
Solo se modelan los campos que consume la transacción de generación; el resto se ignora.
'''

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

class CoinbaseAux(ImmutableModel):
    flags: str = Field("", description="Flags auxiliares en hexadecimal")

    @field_validator("flags")
    @classmethod
    def _flags_must_be_hex(cls, value: str) -> str:
        bytes.fromhex(value)
        return value.lower()

    @property
    def flags_bytes(self) -> bytes:
        return bytes.fromhex(self.flags)

class BlockTemplate(ImmutableModel):
    height: int
    coinbase_value: int = Field(..., alias="coinbasevalue", description="Recompensa total en unidades enteras")
    coinbase_aux: CoinbaseAux = Field(default_factory=CoinbaseAux, alias="coinbaseaux")
    default_witness_commitment: Optional[str] = None
    previous_block_hash: Optional[str] = Field(None, alias="previousblockhash")
    bits: Optional[str] = None
    curtime: Optional[int] = None

    @field_validator("default_witness_commitment")
    @classmethod
    def _commitment_must_be_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            bytes.fromhex(value)
        return value
