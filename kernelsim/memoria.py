"""Memory module: serves every connecting module in its own thread."""

import sys

from kernelsim.config import _create_logger, load_config
from kernelsim.server import process_client, serve_clients, start_server

CONFIG_PATH = "../memoria/memoria.config"


def main(argv=None):
    """Run the memory server; an optional first argument overrides the config path."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else CONFIG_PATH
    logger = _create_logger("memoria_main", "memoria.log")
    try:
        config = load_config(path)
    except OSError:
        logger.error("El path del memoria.config es incorrecto")
        return 1
    try:
        port = config.get_string("PUERTO_ESCUCHA")
    except KeyError as exc:
        logger.error("Configuracion invalida: %s", exc)
        return 1
    try:
        server_sock = start_server(port, logger, "MEMORIA")
    except OSError:
        return 1
    try:
        serve_clients(server_sock, logger, process_client)
    except KeyboardInterrupt:
        pass
    finally:
        server_sock.close()
    return 0