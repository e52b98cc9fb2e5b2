"""Command-line driver that runs the scheduler simulation and writes its log."""

from __future__ import annotations

import argparse
import errno
import math
import string
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from .process import Command, State
from .scheduler import Scheduler

QUANTUM_FILE = "quantum.txt"


@dataclass
class SimulationStats:
    """Counters gathered over one simulation run."""

    quantum: int
    total_instructions: int = 0
    total_exchanges: int = 0
    total_processes: int = 0

    @property
    def average_exchanges(self) -> float:
        """Context switches per finished process."""
        return _ratio(self.total_exchanges, self.total_processes)

    @property
    def average_instructions(self) -> float:
        """Instructions executed per context switch."""
        return _ratio(self.total_instructions, self.total_exchanges)


def _ratio(numerator: int, denominator: int) -> float:
    if denominator:
        return numerator / denominator
    return math.inf if numerator else math.nan


def read_quantum(stream: TextIO) -> int:
    """Read the leading run of decimal digits from ``stream``; 0 when there is none."""
    digits = []
    while ch := stream.read(1):
        if ch not in string.digits:
            break
        digits.append(ch)
    return int("".join(digits)) if digits else 0


def simulate(scheduler: Scheduler, log: TextIO) -> SimulationStats:
    """Run every loaded process to completion, logging each scheduling event."""
    if scheduler.quantum < 1:
        raise ValueError("Quantum should be greater than 0")
    stats = SimulationStats(quantum=scheduler.quantum)
    running = True
    while running:
        pid = scheduler.current_process()
        pcb = scheduler.table[pid]
        pcb.state = State.EXEC
        pcb.credits -= 1
        log.write(f"Executando {pcb.name}\n")

        command: Optional[Command] = None
        executed = 0
        for executed in range(1, scheduler.quantum + 1):
            command = pcb.step()
            if command is Command.END:
                log.write(f"{pcb.name} terminado. X={pcb.regs.x}. Y={pcb.regs.y}\n")
                scheduler.dequeue_ready()
                del scheduler.table[pid]
                scheduler.update_blocked(True)
                stats.total_processes += 1
                break
            if command is Command.IO:
                log.write(f"E/S iniciada em {pcb.name}\n")
                log.write(f"Interrompendo {pcb.name} após {executed} instrucoes\n")
                pcb.state = State.BLOCK
                pcb.regs.pc += 1
                scheduler.enqueue_blocked(scheduler.dequeue_ready())
                break
            pcb.regs.pc += 1

        if command is not Command.END:
            if scheduler.ready:
                scheduler.enqueue_ready(scheduler.dequeue_ready())
            if pcb.state is not State.BLOCK:
                pcb.state = State.READY
                log.write(f"Interrompendo {pcb.name} após {scheduler.quantum} instrucoes\n")
                scheduler.update_blocked(True)
            else:
                scheduler.update_blocked(False)

        stats.total_instructions += executed
        stats.total_exchanges += 1

        if pcb.credits <= 0 and not scheduler.has_credits_left():
            scheduler.reload_credits()

        decision = scheduler.next_process()
        if decision is None:
            if scheduler.blocked:
                while scheduler.next_process() is None:
                    scheduler.update_blocked(True)
            else:
                running = False
        elif decision:
            scheduler.enqueue_ready(scheduler.dequeue_ready())
    return stats


def _write_summary(stats: SimulationStats, log: TextIO) -> None:
    log.write(f"MEDIA DE TROCAS: {stats.average_exchanges:.2f}\n")
    log.write(f"MEDIA DE INSTRUÇÕES: {stats.average_instructions:.2f}\n")
    log.write(f"QUANTUM: {stats.quantum}\n")


def run(
    programs_dir: Union[str, PathLike] = "programas",
    log_dir: Union[str, PathLike] = ".",
) -> SimulationStats:
    """Load the programs, simulate them and write ``logNN.txt`` into ``log_dir``."""
    programs = Path(programs_dir)
    with open(programs / QUANTUM_FILE, encoding="utf-8") as stream:
        quantum = read_quantum(stream)
    if quantum < 1:
        raise ValueError("Quantum should be greater than 0")

    scheduler = Scheduler(quantum, programs)
    log_path = Path(log_dir) / f"log{quantum:02d}.txt"
    with open(log_path, "w", encoding="utf-8") as log:
        scheduler.load_all(log)
        if not scheduler.ready:
            raise FileNotFoundError(errno.ENOENT, "no programs to load", str(programs))
        stats = simulate(scheduler, log)
        _write_summary(stats, log)
    return stats


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="escalonador", description="Simulate a credit-based process scheduler.")
    parser.add_argument("--programs", default="programas", help="directory holding the programs, priorities and quantum")
    parser.add_argument("--log-dir", default=".", help="directory the log file is written to")
    args = parser.parse_args(argv)

    quantum_path = Path(args.programs) / QUANTUM_FILE
    try:
        run(args.programs, args.log_dir)
    except FileNotFoundError as exc:
        if exc.filename is not None and Path(exc.filename) == quantum_path:
            print("Could not read quantum value")
            print(f"Quantum should be specified in {QUANTUM_FILE}")
            print("Exiting...")
            return 0
        print(exc, file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc)
        print("Exiting...")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())