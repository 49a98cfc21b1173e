# gpc/core/scripting/opcodes.py

from enum import IntEnum, unique

# Mayor longitud que admite un push directo (1 byte de opcode)
MAX_DIRECT_PUSH = 0x4b

@unique
class Opcodes(IntEnum):

    # --- CONSTANTES ---
    OP_0 = 0x00         # Empuja un vector vacío (también versión 0 de witness)
    OP_PUSHDATA1 = 0x4c # Siguiente byte indica la longitud del dato
    OP_1 = 0x51         # OP_1..OP_16 = 0x50 + n

    # --- MANIPULACIÓN DE PILA ---
    OP_DUP = 0x76       # Duplica el elemento superior

    # --- OPERADORES LÓGICOS ---
    OP_EQUAL = 0x87     # Compara los dos elementos superiores
    OP_EQUALVERIFY = 0x88 # OP_EQUAL seguido de una interrupción si es falso

    # --- CRIPTOGRAFÍA ---
    OP_HASH160 = 0xa9   # RIPEMD160(SHA256(item))
    OP_CHECKSIG = 0xac  # Verifica firma ECDSA contra clave pública

    # --- DATOS ---
    OP_RETURN = 0x6a    # Salida no gastable (compromisos, etiquetas)

    @classmethod
    def small_int(cls, value: int) -> int:
        """Opcode de un entero pequeño (0 -> OP_0, 1..16 -> OP_1..OP_16)."""
        if value == 0:
            return cls.OP_0
        if 1 <= value <= 16:
            return 0x50 + value
        raise ValueError(f"{value} no es un entero pequeño de script.")
