# gpc/core/utils/monetary.py
import logging
from decimal import Decimal, InvalidOperation, getcontext
from typing import Union

from gpc.core.exceptions import InvalidRecipientShare

# Configuración de precisión para cálculos financieros de alta fidelidad
getcontext().prec = 28

# Tipado de entrada
PercentInput = Union[str, int, float, Decimal]

logger = logging.getLogger(__name__)

class Monetary:
    """
    Aritmética monetaria sin coma flotante.
    Los montos viajan siempre como enteros (unidades mínimas del coin) y los
    porcentajes como enteros escalados (PERCENT_SCALE unidades = 1%).
    """

    DECIMALS = 8
    COIN_FACTOR = 10 ** DECIMALS

    PERCENT_DECIMALS = 6
    PERCENT_SCALE = 10 ** PERCENT_DECIMALS
    FULL_PERCENT_UNITS = 100 * PERCENT_SCALE

    @staticmethod
    def percent_to_units(percent: PercentInput) -> int:
        try:
            # 1. Normalización a Decimal (str protege contra imprecisión de floats)
            d_percent = Decimal(str(percent))
        except (InvalidOperation, ValueError, TypeError):
            logger.exception(f"Porcentaje ilegible: {percent}")
            raise InvalidRecipientShare(f"Porcentaje inválido: {percent!r}")

        if not d_percent.is_finite():
            raise InvalidRecipientShare(f"Porcentaje no finito: {percent!r}")

        if d_percent.is_zero():
            return 0
        # Más de 3 cifras enteras nunca es un porcentaje válido; acota los exponentes extremos
        if not -Monetary.PERCENT_DECIMALS <= d_percent.adjusted() <= 2:
            raise InvalidRecipientShare(f"Porcentaje fuera de rango o de precisión: {percent!r}")

        # 2. Escalado exacto sobre los dígitos (sin redondeo del contexto decimal)
        sign, digits, exponent = d_percent.as_tuple()
        coefficient = int("".join(map(str, digits)))
        shift = exponent + Monetary.PERCENT_DECIMALS

        if shift >= 0:
            units = coefficient * 10 ** shift
        else:
            units, fraction = divmod(coefficient, 10 ** -shift)
            # 3. No se admiten fracciones por debajo de la escala
            if fraction:
                raise InvalidRecipientShare(
                    f"Porcentaje {percent!r} excede la precisión soportada ({Monetary.PERCENT_DECIMALS} decimales)."
                )

        return -units if sign else units

    @staticmethod
    def share_of(amount: int, percent_units: int) -> int:
        """floor(amount * percent / 100) en aritmética entera."""
        return (amount * percent_units) // Monetary.FULL_PERCENT_UNITS

    @staticmethod
    def to_coins(amount: int) -> Decimal:
        """Solo para visualización (logs)."""
        return Decimal(amount) / Decimal(Monetary.COIN_FACTOR)
