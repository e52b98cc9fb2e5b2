"""Process control blocks and the small instruction set they execute."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DEFAULT_IO_TIMER = 2


class State(enum.Enum):
    """Lifecycle state of a process."""

    BLOCK = "block"
    READY = "ready"
    EXEC = "exec"


class Command(enum.Enum):
    """Kind of instruction a process has just executed."""

    IO = "io"
    COM = "com"
    ATRIB = "atrib"
    END = "end"


@dataclass
class Registers:
    """Register file of a process; the program counter starts past the name line."""

    x: int = 0
    y: int = 0
    pc: int = 1


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way, yielding 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class ProcessControlBlock:
    """A loaded program together with its scheduling state.

    Line 0 of ``content`` holds the process name; instructions start at line 1.
    """

    content: list[str]
    credits: int
    state: State = State.READY
    regs: Registers = field(default_factory=Registers)
    io_timer: int = DEFAULT_IO_TIMER

    @property
    def name(self) -> str:
        return self.content[0] if self.content else ""

    def step(self) -> Command:
        """Execute the instruction at the program counter and report its kind.

        The program counter is left unchanged; advancing it is up to the caller.
        """
        pc = self.regs.pc
        if pc < 0 or pc >= len(self.content):
            raise IndexError(f"program counter {pc} is past the end of {self.name!r}")
        line = self.content[pc]
        opcode = line[:1]
        if opcode == "C":
            return Command.COM
        if opcode == "S":
            return Command.END
        if opcode == "E":
            return Command.IO
        if opcode == "X":
            self.regs.x = _atoi(line[2:])
            return Command.ATRIB
        if opcode == "Y":
            self.regs.y = _atoi(line[2:])
            return Command.ATRIB
        raise ValueError(f"unknown instruction {line!r} at line {pc} of {self.name!r}")


def load_program(text: str, credits: int) -> ProcessControlBlock:
    """Build a ready process from program text, one instruction per line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return ProcessControlBlock(content=lines, credits=credits, state=State.READY)


def read_priority(path: Union[str, PathLike], proc_num: int) -> int:
    """Return the priority on line ``proc_num`` (1-based) of the priority file.

    Returns -1 when the file has no such line; raises ValueError when the
    line does not start with an integer.
    """
    with open(path, encoding="utf-8") as stream:
        for line_no, line in enumerate(stream, start=1):
            if line_no == proc_num:
                match = _LEADING_INT.match(line)
                if match is None:
                    raise ValueError(f"cannot read priority from line {line_no}: {line!r}")
                return int(match.group(1))
    return -1