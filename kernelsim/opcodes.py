"""Operation codes shared by every module of the system."""

from enum import IntEnum


class OpCode(IntEnum):
    """Operation code carried in the first byte of every package."""

    TEST_COMUNICACIONAL = 1
    SUSPENDER_PROCESO = 2
    FINALIZAR_PROCESO = 3
    OBTENER_TABLA_PAGINAS = 4
    LEER_MEMORIA = 5
    ESCRIBIR_MEMORIA = 6
    LEER_PAGINA_COMPLETA = 7
    ACTUALIZAR_PAGINA_COMPLETA = 8
    MEMORY_DUMP = 9
    RESPUESTA_OK = 10
    RESPUESTA_ERROR = 11