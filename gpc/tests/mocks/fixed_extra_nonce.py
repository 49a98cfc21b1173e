'''
class FixedExtraNonce:
    Placeholder de longitud fija para construir Coinbases deterministas en los tests.

    Methods::
        next_extranonce1() -> bytes:
            Retorna siempre MOCK_EXTRANONCE1 recortado al tamaño configurado.
'''

from gpc.core.interfaces.i_extra_nonce import IExtraNonce

class FixedExtraNonce(IExtraNonce):

    MOCK_EXTRANONCE1: bytes = b"\xaa\xbb\xcc\xdd"

    def __init__(self, placeholder_length: int = 8, extranonce2_size: int = 4) -> None:
        self._placeholder = b"\x00" * placeholder_length
        self._extranonce2_size = extranonce2_size

    @property
    def extra_nonce_placeholder(self) -> bytes:
        return self._placeholder

    @property
    def extranonce2_size(self) -> int:
        return self._extranonce2_size

    def next_extranonce1(self) -> bytes:
        return self.MOCK_EXTRANONCE1[:len(self._placeholder) - self._extranonce2_size]
