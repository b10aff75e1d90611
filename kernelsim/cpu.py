"""CPU module: greets the kernel's dispatch and interrupt ports and memory."""

import sys
from contextlib import ExitStack

from kernelsim.client import create_connection, handshake_client
from kernelsim.config import _create_logger, load_config
from kernelsim.message import send_message

CONFIG_PATH = "../cpu/cpu.config"

_TARGETS = (
    ("IP_KERNEL", "PUERTO_KERNEL_DISPATCH", "CPU -> DISPATCH KERNEL",
     "SALUDOS DESDE CPU HACIA EL DISPATCH DE KERNEL!"),
    ("IP_KERNEL", "PUERTO_KERNEL_INTERRUPT", "CPU -> INTERRUPT KERNEL",
     "SALUDOS DESDE CPU HACIA EL INTERRUPT DE KERNEL!"),
    ("IP_MEMORIA", "PUERTO_MEMORIA", "CPU -> MEMORY",
     "SALUDOS DESDE CPU HACIA MEMORY!"),
)


def main(argv=None):
    """Run the CPU; an optional first argument overrides the config path."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else CONFIG_PATH
    logger = _create_logger("cpu_main", "cpu.log")
    try:
        config = load_config(path)
    except OSError:
        logger.error("El path del cpu.config es incorrecto")
        return 1
    try:
        targets = [
            (config.get_string(ip_key), config.get_string(port_key), name, text)
            for ip_key, port_key, name, text in _TARGETS
        ]
    except KeyError as exc:
        logger.error("Configuracion invalida: %s", exc)
        return 1

    with ExitStack() as stack:
        for ip, port, name, text in targets:
            try:
                sock = stack.enter_context(create_connection(ip, port, name, logger))
                handshake_client(sock, name, logger)
                send_message(sock, text)
            except ConnectionError as exc:
                logger.error("%s", exc)
                return 1
    return 0