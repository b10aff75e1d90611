"""Server side of the module-to-module protocol."""

import socket
import struct
import threading

from kernelsim.client import HANDSHAKE_OK, HANDSHAKE_REQUEST, _recv_exact
from kernelsim.message import extract_message, receive_payload
from kernelsim.opcodes import OpCode

HANDSHAKE_ERROR = -1

_INT32 = struct.Struct("<i")


def start_server(port, logger, module):
    """Open a listening TCP socket on ``port`` for ``module``."""
    try:
        infos = socket.getaddrinfo(
            None, port, socket.AF_INET, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )
    except socket.gaierror:
        logger.error("Error starting the listening server of module %s", module)
        raise
    family, socktype, proto, _, address = infos[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(address)
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        logger.error("Error starting the listening server of module %s", module)
        raise
    logger.info("Ready to listen to module: %s", module)
    return sock


def handshake_server(conn, logger):
    """Answer a client's handshake; return whether it was valid."""
    (handshake,) = _INT32.unpack(_recv_exact(conn, _INT32.size))
    if handshake == HANDSHAKE_REQUEST:
        logger.info("Handshake received")
        conn.sendall(_INT32.pack(HANDSHAKE_OK))
        return True
    logger.error("Handshake error")
    conn.sendall(_INT32.pack(HANDSHAKE_ERROR))
    return False


def receive_opcode(sock):
    """Read one op code byte; on disconnection close ``sock`` and return None."""
    data = sock.recv(1)
    if not data:
        sock.close()
        return None
    return data[0]


def process_client(conn, logger):
    """Serve one client until it disconnects; return the messages received."""
    handshake_server(conn, logger)
    messages = []
    while True:
        op_code = receive_opcode(conn)
        if op_code is not None:
            try:
                payload = receive_payload(conn)
            except ConnectionError:
                conn.close()
                op_code = None
        if op_code is None:
            print("El cliente se desconecto")
            break
        if op_code == OpCode.TEST_COMUNICACIONAL:
            message = extract_message(payload)
            messages.append(message)
            print("ok")
            print("\n------------------------")
            print(f"Tamanio de mensaje: {message.length}")
            print(f"Mensaje del buffer: {message.content}")
    return messages


def wait_for_client(server_sock, logger):
    """Accept the next client connection."""
    try:
        conn, _ = server_sock.accept()
    except OSError:
        logger.error("Error while waiting for a client")
        raise
    logger.info("A client connected")
    return conn


def serve_clients(server_sock, logger, handler):
    """Accept clients forever, each handled by ``handler(conn, logger)`` in its own thread.

    Returns once ``server_sock`` has been closed.
    """
    while True:
        try:
            conn = wait_for_client(server_sock, logger)
        except OSError:
            if server_sock.fileno() == -1:
                return
            raise
        threading.Thread(target=handler, args=(conn, logger), daemon=True).start()