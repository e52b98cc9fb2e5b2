"""Credit-based scheduler with a ready queue and a blocked (I/O) queue."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, TextIO, Union

from .process import ProcessControlBlock, State, load_program, read_priority

PROGRAM_COUNT = 10
PRIORITY_FILE = "prioridades.txt"


class Scheduler:
    """Process table plus ready and blocked queues of process ids.

    The ready queue is kept ordered by credits, highest first; a newly
    queued process goes ahead of any process with equal or fewer credits.
    """

    def __init__(self, quantum: int, programs_dir: Union[str, PathLike] = "programas") -> None:
        self.quantum = quantum
        self.programs_dir = Path(programs_dir)
        self.io_time = 2
        self.table: dict[int, ProcessControlBlock] = {}
        self.ready: list[int] = []
        self.blocked: list[int] = []

    @property
    def priority_path(self) -> Path:
        return self.programs_dir / PRIORITY_FILE

    def _credits(self, pid: int) -> int:
        return self.table[pid].credits

    def enqueue_ready(self, pid: int) -> None:
        """Insert a process into the ready queue by credits."""
        credits = self._credits(pid)
        position = next(
            (index for index, other in enumerate(self.ready) if credits >= self._credits(other)),
            len(self.ready),
        )
        self.ready.insert(position, pid)

    def enqueue_blocked(self, pid: int) -> None:
        """Append a process to the blocked queue and start its I/O timer."""
        self.table[pid].io_timer = self.io_time
        self.blocked.append(pid)

    def dequeue_ready(self) -> int:
        """Remove and return the process at the head of the ready queue."""
        if not self.ready:
            raise IndexError("ready queue is empty")
        return self.ready.pop(0)

    def update_blocked(self, update_last: bool) -> None:
        """Tick the I/O timers of blocked processes, readying those that finish.

        With ``update_last`` false the last process in the queue is left untouched.
        """
        pending = list(self.blocked) if update_last else self.blocked[:-1]
        for pid in pending:
            pcb = self.table[pid]
            pcb.io_timer -= 1
            if pcb.io_timer == 0:
                pcb.state = State.READY
                self.blocked.remove(pid)
                self.enqueue_ready(pid)

    def current_process(self) -> int:
        """Return the id of the process at the head of the ready queue."""
        if not self.ready:
            raise IndexError("ready queue is empty")
        return self.ready[0]

    def next_process(self) -> Optional[bool]:
        """Decide what runs next.

        Returns None when nothing is ready, True when the head process should
        yield to the one behind it, and False when it keeps running.
        """
        if not self.ready:
            return None
        if len(self.ready) == 1:
            return False
        head, following = self.ready[0], self.ready[1]
        return self._credits(head) < self._credits(following)

    def has_credits_left(self) -> bool:
        """Whether any ready or blocked process still has credits."""
        return any(self._credits(pid) > 0 for pid in (*self.ready, *self.blocked))

    def load_all(self, log: TextIO) -> bool:
        """Load programs 01..10 from the programs directory into the ready queue.

        Stops at the first missing program file and returns False; True when
        every program was loaded.
        """
        for pid in range(1, PROGRAM_COUNT + 1):
            path = self.programs_dir / f"{pid:02d}.txt"
            if not path.is_file():
                return False
            credits = read_priority(self.priority_path, pid)
            self.table[pid] = load_program(path.read_text(encoding="utf-8"), credits)
            self.enqueue_ready(pid)
            log.write(f"Carregando {self.table[pid].name}\n")
        return True

    def reload_credits(self) -> None:
        """Restore every queued process's credits from the priority file."""
        for pid in self.ready:
            self.table[pid].credits = read_priority(self.priority_path, pid)
        self.ready.sort(key=self._credits, reverse=True)
        for pid in self.blocked:
            self.table[pid].credits = read_priority(self.priority_path, pid)