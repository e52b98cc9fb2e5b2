# escalonador

A simulator of a credit-based round-robin process scheduler with blocking I/O.
It loads up to ten small programs and runs them with a fixed quantum. It writes a
log of every scheduling event. The log ends with the average number of context
switches per finished process and the average number of instructions per switch.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Input files

The simulator reads its input from a programs directory, `programas` by default.

- `quantum.txt`: the quantum. The leading decimal digits of the file are read.
- `prioridades.txt`: one integer per line. Line *n* gives the priority of program
  *n*, which is also its initial number of credits. A program with no line gets -1.
- `01.txt` … `10.txt`: the programs. Loading stops at the first missing file. The
  first line of each file is the process name. Each line after it is one
  instruction, recognised by its first character:
  - `C...` (for example `COM`): an ordinary instruction.
  - `X=<int>` / `Y=<int>`: set register X or Y.
  - `E...` (for example `E/S`): start I/O. The process moves to the blocked queue
    with an I/O timer of 2.
  - `S...` (for example `SAIDA`): the process ends.

  Any other instruction stops the run with an error.

## How scheduling works

- The ready queue is ordered by credits, highest first. A process that is queued
  goes ahead of every process with the same number of credits or fewer.
- Each time a process is dispatched it loses one credit. It then runs for up to
  `quantum` instructions, or until it starts I/O or ends.
- Blocked processes have their I/O timers counted down after each turn. A process
  whose timer reaches zero goes back to the ready queue.
- A process keeps running while the next ready process does not have more credits.
- When the process that just ran has no credits left, and no ready or blocked
  process has any, every queued process gets its credits back from
  `prioridades.txt`.

## Running

```
escalonador [--programs DIR] [--log-dir DIR]
```

- `--programs`: directory holding the programs, priorities and quantum
  (default `programas`).
- `--log-dir`: directory the log is written to (default `.`).

The log is written to `logNN.txt`, where `NN` is the quantum padded to two digits.
If `quantum.txt` is missing, or the quantum is below 1, the command prints a message
and exits with status 0. If no program could be loaded, or the priority file is
missing, it prints the error to standard error and exits with status 1.

## Log format

```
Carregando <name>
Executando <name>
E/S iniciada em <name>
Interrompendo <name> após <n> instrucoes
<name> terminado. X=<x>. Y=<y>
MEDIA DE TROCAS: <average>
MEDIA DE INSTRUÇÕES: <average>
QUANTUM: <quantum>
```

## Library use

```python
from escalonador.process import load_program, read_priority, ProcessControlBlock
from escalonador.scheduler import Scheduler
from escalonador.cli import read_quantum, simulate, run, SimulationStats
```

- `load_program(text, credits)` builds a `ProcessControlBlock` from program text.
  `ProcessControlBlock.step()` runs the instruction at the program counter and
  returns a `Command` (`IO`, `COM`, `ATRIB`, `END`).
- `read_priority(path, proc_num)` reads the priority on line `proc_num` of a
  priority file.
- `Scheduler(quantum, programs_dir)` holds the process table and the `ready` and
  `blocked` queues of process ids. `load_all(log)` loads the programs.
- `simulate(scheduler, log)` runs the loaded processes to completion, writing to
  `log`. It returns a `SimulationStats` with `average_exchanges` and
  `average_instructions`.
- `run(programs_dir, log_dir)` does the whole job from files and returns the stats.