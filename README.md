# kernelsim

A small operating-system simulation made of four console programs
(kernel, CPU, memory and I/O). The CPU, I/O and memory programs exchange
greeting messages over TCP using a compact binary protocol. The kernel
keeps process control blocks and runs a FIFO long-term planner.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it does                                                                                   |
|----------------------|------------------------------------------------------------------------------------------------|
| `kernelsim-memoria`  | Listens on `PUERTO_ESCUCHA`. It serves each client on its own thread and prints every message it receives. |
| `kernelsim-cpu`      | Connects to the kernel's dispatch port, the kernel's interrupt port and memory. It does a handshake on each and sends one greeting message to each. |
| `kernelsim-io`       | Connects to the kernel's I/O port, does a handshake and sends one greeting message.            |
| `kernelsim-kernel`   | Creates a first process in NEW and moves it to READY through the long-term planner.            |

`kernelsim-memoria`, `kernelsim-cpu` and `kernelsim-io` take an optional
argument, the path of their configuration file. Without it they read
`../memoria/memoria.config`, `../cpu/cpu.config` and `../io/io.config`,
relative to the working directory.

`kernelsim-kernel` takes the name of a pseudocode file and the size of the
first process. It reads `kernel.config` from the working directory:

```
kernelsim-kernel program.txt 256
```

It prints a prompt and waits for Enter before it starts planning. It then
creates process 0 in NEW, requests memory for it, moves it to READY and
logs each step. It keeps running until it is interrupted with Ctrl-C.

Each program logs at INFO level to the console and to a file in the
working directory: `kernel.log`, `cpu.log`, `io.log` or `memoria.log`.
A missing configuration file, a missing or malformed key, or a failed
connection or handshake is logged, and the program exits with status 1.

## Configuration

Configuration files hold one `KEY=VALUE` per line. Blank lines and lines
that start with `#` are ignored. Use `kernelsim.config.load_config` to read
such a file from code. It returns a `Config` with `get_string`, `get_int`
and `get_float`.

- Memory: `PUERTO_ESCUCHA`
- CPU: `IP_KERNEL`, `IP_MEMORIA`, `PUERTO_MEMORIA`,
  `PUERTO_KERNEL_DISPATCH`, `PUERTO_KERNEL_INTERRUPT`
- I/O: `IP_KERNEL`, `PUERTO_KERNEL`
- Kernel: `IP_MEMORIA`, `PUERTO_MEMORIA`, `PUERTO_ESCUCHA_DISPATCH`,
  `PUERTO_ESCUCHA_INTERRUPT`, `PUERTO_ESCUCHA_IO`,
  `ALGORITMO_CORTO_PLAZO`, `ALGORITMO_INGRESO_A_READY`, `ALFA`,
  `ESTIMACION_INICIAL`, `TIEMPO_SUSPENSION`. All of these keys must be
  present and well formed (`kernelsim.kernel.KernelSettings.from_config`),
  even though the kernel does not yet act on them.

Example `memoria.config`:

```
PUERTO_ESCUCHA=8002
```

## Protocol

All integers are little-endian.

- **Handshake**: the client sends the 32-bit integer `1`. The server
  answers `0` to accept it or `-1` to refuse it. If the server refuses, or
  closes the connection without answering,
  `kernelsim.client.handshake_client` raises
  `kernelsim.client.HandshakeError`.
- **Package**: a one-byte operation code (`kernelsim.opcodes.OpCode`), an
  unsigned 32-bit payload size, and then the payload.
- **Test message**: operation `OpCode.TEST_COMUNICACIONAL`. Its payload is
  an unsigned 32-bit length followed by that many bytes of UTF-8 text,
  NUL-terminated. The length counts the NUL byte.

## Library use

```python
from kernelsim.buffer import Buffer
from kernelsim.client import Package
from kernelsim.opcodes import OpCode

text = "hello"
buf = Buffer(4 + len(text) + 1)
buf.add_string(text)
wire = Package(OpCode.TEST_COMUNICACIONAL, buf).serialize()
# b"\x01\x0a\x00\x00\x00\x06\x00\x00\x00hello\x00"
```

- `kernelsim.buffer.Buffer` is a fixed-size byte buffer. It has
  `add_bytes`, `add_uint32`, `add_uint8`, `add_string` and `getvalue`.
  Writing past its end raises `OverflowError`.
- `kernelsim.client`: `create_connection`, `handshake_client`, `Package`
  and `send_package`.
- `kernelsim.message`: `send_message`, `receive_payload`,
  `extract_message` and the `Message` dataclass (`length`, `content`).
- `kernelsim.server`: `start_server`, `handshake_server`,
  `receive_opcode`, `wait_for_client`, `process_client` (returns the
  messages received once the client disconnects) and `serve_clients`
  (runs each client on a daemon thread and returns when the listening
  socket is closed).
- `kernelsim.kernel`: `ProcessState`, `PCB`, `KernelSettings` and
  `Scheduler`. The scheduler has `create_pcb`, `add_new_process`,
  `request_memory`, `change_state`, `admit_next` and `run_long_term`.
  `change_state` counts entries into each state and the milliseconds
  spent in each state.

## What it does not do

- The kernel does not listen on its dispatch, interrupt or I/O ports, and
  it does not connect to memory. `kernelsim-cpu` and `kernelsim-io` can
  only reach a kernel port if some other server listens there. For
  example, you can run `kernelsim-memoria` with a configuration that
  points at that port.
- `Scheduler.request_memory` does not contact memory. It always grants
  memory.
- There is no short-term scheduler. Processes reach READY and go no
  further. EXEC, BLOCKED and EXIT exist only as states.
- The memory server handles only test messages. It reads other operation
  codes and their payloads, and then ignores them.