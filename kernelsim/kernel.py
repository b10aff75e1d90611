"""Kernel process scheduling: PCBs, state changes and the long-term planner."""

import sys
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum

from kernelsim.config import _create_logger, load_config

CONFIG_PATH = "kernel.config"


class ProcessState(IntEnum):
    """States a process moves through."""

    NEW = 0
    READY = 1
    EXEC = 2
    BLOCKED = 3
    EXIT = 4


def _zero_per_state():
    return [0] * len(ProcessState)


@dataclass
class PCB:
    """Process control block.

    ``state_counts`` counts entries into each state, ``state_times`` holds
    milliseconds spent in each, and ``state_started`` is the monotonic
    nanosecond time at which the current state began.
    """

    pid: int
    file_name: str
    size: int
    pc: int = 0
    state: ProcessState = ProcessState.NEW
    state_counts: list = field(default_factory=_zero_per_state)
    state_times: list = field(default_factory=_zero_per_state)
    state_started: int = field(default_factory=time.monotonic_ns)


@dataclass(frozen=True)
class KernelSettings:
    """Values the kernel reads from its configuration file."""

    memory_ip: str
    memory_port: int
    dispatch_port: int
    interrupt_port: int
    io_port: int
    short_term_algorithm: str
    ready_admission_algorithm: str
    alpha: float
    initial_estimate: int
    suspension_time: int

    @classmethod
    def from_config(cls, config):
        """Build the settings from a Config."""
        return cls(
            memory_ip=config.get_string("IP_MEMORIA"),
            memory_port=config.get_int("PUERTO_MEMORIA"),
            dispatch_port=config.get_int("PUERTO_ESCUCHA_DISPATCH"),
            interrupt_port=config.get_int("PUERTO_ESCUCHA_INTERRUPT"),
            io_port=config.get_int("PUERTO_ESCUCHA_IO"),
            short_term_algorithm=config.get_string("ALGORITMO_CORTO_PLAZO"),
            ready_admission_algorithm=config.get_string("ALGORITMO_INGRESO_A_READY"),
            alpha=config.get_float("ALFA"),
            initial_estimate=config.get_int("ESTIMACION_INICIAL"),
            suspension_time=config.get_int("TIEMPO_SUSPENSION"),
        )


class Scheduler:
    """Process queues and the FIFO long-term planner.

    The planner admits nothing until ``active`` is set.
    """

    def __init__(self, logger):
        self.logger = logger
        self.new_queue = deque()
        self.ready = []
        self.executing = []
        self.blocked = []
        self.exited = []
        self._new_lock = threading.Lock()
        self._ready_lock = threading.Lock()
        self._pid_lock = threading.Lock()
        self.new_available = threading.Semaphore(0)
        self.ready_available = threading.Semaphore(0)
        self._next_pid = 0
        self.active = False

    def create_pcb(self, file_name, size):
        """Create a PCB in state NEW with the next free pid."""
        with self._pid_lock:
            pid = self._next_pid
            self._next_pid += 1
        pcb = PCB(pid=pid, file_name=file_name, size=size)
        pcb.state_counts[ProcessState.NEW] += 1
        self.logger.info("## (%d) Se crea el proceso - Estado: NEW", pcb.pid)
        return pcb

    def add_new_process(self, file_name, size):
        """Create a process, queue it in NEW and signal the planner."""
        pcb = self.create_pcb(file_name, size)
        with self._new_lock:
            self.new_queue.append(pcb)
        self.new_available.release()
        self.logger.info(
            "Proceso agregado a la cola NEW - PID: %d, Archivo: %s, Tamaño: %d",
            pcb.pid,
            pcb.file_name,
            pcb.size,
        )
        return pcb

    def request_memory(self, pcb):
        """Ask memory for room for ``pcb``; memory always has room for now."""
        self.logger.info("## Solicitando memoria para el proceso %d", pcb.pid)
        return True

    def change_state(self, pcb, new_state):
        """Move ``pcb`` to ``new_state``, accounting time spent in the old one."""
        previous = pcb.state
        now = time.monotonic_ns()
        pcb.state_times[previous] += (now - pcb.state_started) // 1_000_000
        pcb.state = ProcessState(new_state)
        pcb.state_counts[pcb.state] += 1
        pcb.state_started = time.monotonic_ns()
        self.logger.info(
            "## (%d) Pasa del estado %s al estado %s",
            pcb.pid,
            previous.name,
            pcb.state.name,
        )

    def admit_next(self):
        """Move the oldest NEW process to READY; return it, or None if none moved."""
        if not self.active:
            return None
        with self._new_lock:
            if not self.new_queue:
                return None
            pcb = self.new_queue[0]
        if not self.request_memory(pcb):
            self.logger.info("## No hay memoria disponible para el proceso %d", pcb.pid)
            return None
        with self._new_lock:
            self.new_queue.popleft()
        self.change_state(pcb, ProcessState.READY)
        with self._ready_lock:
            self.ready.append(pcb)
        self.ready_available.release()
        self.logger.info("## Proceso %d pasó de NEW a READY", pcb.pid)
        return pcb

    def run_long_term(self, stop_event):
        """Admit processes as they arrive until ``stop_event`` is set."""
        self.logger.info("Planificador de Largo Plazo iniciado")
        while not stop_event.is_set():
            if self.new_available.acquire(timeout=0.1):
                self.admit_next()


def main(argv=None):
    """Start the kernel with an initial process: ``[file] [size]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    usage = "Uso: kernel [archivo_pseudocodigo] [tamanio_proceso]"
    if len(args) < 2:
        print(usage)
        return 1
    try:
        initial_size = int(args[1])
    except ValueError:
        print(usage)
        return 1
    initial_file = args[0]

    logger = _create_logger("KERNEL", "kernel.log")
    logger.info("Iniciando Kernel...")
    try:
        config = load_config(CONFIG_PATH)
    except OSError:
        logger.error("El path del kernel.config es incorrecto")
        return 1
    try:
        KernelSettings.from_config(config)
    except (KeyError, ValueError) as exc:
        logger.error("Configuracion invalida: %s", exc)
        return 1

    scheduler = Scheduler(logger)
    print("Presione Enter para iniciar la planificación...")
    try:
        input()
    except EOFError:
        pass
    scheduler.active = True
    logger.info("Planificador activado")
    logger.info("Conexiones inicializadas correctamente")

    stop = threading.Event()
    planner = threading.Thread(target=scheduler.run_long_term, args=(stop,), daemon=True)
    planner.start()
    scheduler.add_new_process(initial_file, initial_size)
    try:
        while planner.is_alive():
            planner.join(0.5)
    except KeyboardInterrupt:
        stop.set()
        planner.join()
    return 0