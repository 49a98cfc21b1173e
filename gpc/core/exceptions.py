# gpc/core/exceptions.py
'''
Jerarquía de errores de la construcción de la transacción de generación.

    GenerationError: Base común (hereda de ValueError para que los llamadores
        que ya capturan ValueError sigan funcionando).
    InvalidAddress: Dirección de destino con checksum o versión desconocida.
    InvalidRecipientShare: Porcentajes de recompensa mal configurados.
    EncodingOverflow: Longitud o monto fuera del rango del formato binario.
    SupersededTemplate: Construcción terminada después de la de una plantilla más nueva.
'''


class GenerationError(ValueError):
    """Error fatal al construir la transacción de generación."""
    pass


class InvalidAddress(GenerationError):

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Dirección inválida '{address}': {reason}")


class InvalidRecipientShare(GenerationError):
    pass


class EncodingOverflow(GenerationError):
    pass


class SupersededTemplate(GenerationError):
    """La plantilla quedó obsoleta: otra más reciente ya publicó su trabajo."""
    pass
