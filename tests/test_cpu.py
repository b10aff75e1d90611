import logging
import socket
import threading

from kernelsim.cpu import main
from kernelsim.server import process_client, start_server, wait_for_client

LOGGER = logging.getLogger("kernelsim-test")


def _fake_module(results, key):
    server_sock = start_server("0", LOGGER, key)
    port = server_sock.getsockname()[1]

    def run():
        conn = wait_for_client(server_sock, LOGGER)
        results[key] = process_client(conn, LOGGER)
        server_sock.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, thread


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_cpu_greets_kernel_and_memory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    results = {}
    dispatch, t1 = _fake_module(results, "dispatch")
    interrupt, t2 = _fake_module(results, "interrupt")
    memory, t3 = _fake_module(results, "memory")
    config = tmp_path / "cpu.config"
    config.write_text(
        "IP_KERNEL=127.0.0.1\nIP_MEMORIA=127.0.0.1\n"
        f"PUERTO_KERNEL_DISPATCH={dispatch}\n"
        f"PUERTO_KERNEL_INTERRUPT={interrupt}\n"
        f"PUERTO_MEMORIA={memory}\n",
        encoding="utf-8",
    )
    assert main([str(config)]) == 0
    for thread in (t1, t2, t3):
        thread.join(timeout=5)
    assert [m.content for m in results["dispatch"]] == [
        "SALUDOS DESDE CPU HACIA EL DISPATCH DE KERNEL!"
    ]
    assert [m.content for m in results["interrupt"]] == [
        "SALUDOS DESDE CPU HACIA EL INTERRUPT DE KERNEL!"
    ]
    assert [m.content for m in results["memory"]] == ["SALUDOS DESDE CPU HACIA MEMORY!"]


def test_cpu_fails_without_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "absent.config")]) == 1


def test_cpu_fails_when_kernel_unreachable(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    port = _free_port()
    config = tmp_path / "cpu.config"
    config.write_text(
        "IP_KERNEL=127.0.0.1\nIP_MEMORIA=127.0.0.1\n"
        f"PUERTO_KERNEL_DISPATCH={port}\nPUERTO_KERNEL_INTERRUPT={port}\n"
        f"PUERTO_MEMORIA={port}\n",
        encoding="utf-8",
    )
    assert main([str(config)]) == 1


def test_cpu_fails_on_missing_key(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "cpu.config"
    config.write_text("IP_KERNEL=127.0.0.1\n", encoding="utf-8")
    assert main([str(config)]) == 1