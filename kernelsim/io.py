"""IO module: greets the kernel."""

import sys

from kernelsim.client import create_connection, handshake_client
from kernelsim.config import _create_logger, load_config
from kernelsim.message import send_message

CONFIG_PATH = "../io/io.config"
_SERVER_NAME = "IO -> KERNEL"
_GREETING = "SALUDOS DESDE IO HACIA EL KERNEL!"


def main(argv=None):
    """Run the IO module; an optional first argument overrides the config path."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else CONFIG_PATH
    logger = _create_logger("io_main", "io.log")
    try:
        config = load_config(path)
    except OSError:
        logger.error("El path del io.config es incorrecto")
        return 1
    try:
        ip = config.get_string("IP_KERNEL")
        port = config.get_string("PUERTO_KERNEL")
    except KeyError as exc:
        logger.error("Configuracion invalida: %s", exc)
        return 1
    try:
        with create_connection(ip, port, _SERVER_NAME, logger) as sock:
            handshake_client(sock, _SERVER_NAME, logger)
            send_message(sock, _GREETING)
    except ConnectionError as exc:
        logger.error("%s", exc)
        return 1
    return 0