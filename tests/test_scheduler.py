import io

import pytest

from escalonador.process import State, load_program
from escalonador.scheduler import Scheduler


def _add(scheduler, pid, credits):
    scheduler.table[pid] = load_program(f"P{pid}\nCOM\nSAIDA\n", credits)


def _credits_order(scheduler):
    return [scheduler.table[pid].credits for pid in scheduler.ready]


def _write_programs(directory, priorities):
    for pid in range(1, 11):
        (directory / f"{pid:02d}.txt").write_text(f"TESTE-{pid}\nCOM\nSAIDA\n")
    (directory / "prioridades.txt").write_text("".join(f"{p}\n" for p in priorities))


def test_enqueue_ready_orders_by_credits():
    scheduler = Scheduler(3)
    for pid, credits in [(1, 2), (2, 5), (3, 3), (4, 1), (5, 4)]:
        _add(scheduler, pid, credits)
        scheduler.enqueue_ready(pid)
    order = _credits_order(scheduler)
    assert order == sorted(order, reverse=True)
    assert sorted(scheduler.ready) == [1, 2, 3, 4, 5]


def test_enqueue_ready_new_goes_before_equal():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 3)
    _add(scheduler, 2, 3)
    scheduler.enqueue_ready(1)
    scheduler.enqueue_ready(2)
    assert scheduler.ready == [2, 1]


def test_dequeue_ready_returns_head():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 3)
    scheduler.enqueue_ready(1)
    assert scheduler.current_process() == 1
    assert scheduler.dequeue_ready() == 1
    assert scheduler.ready == []


def test_dequeue_ready_empty_raises():
    with pytest.raises(IndexError):
        Scheduler(3).dequeue_ready()


def test_current_process_empty_raises():
    with pytest.raises(IndexError):
        Scheduler(3).current_process()


def test_enqueue_blocked_appends_and_sets_timer():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 3)
    _add(scheduler, 2, 3)
    scheduler.table[1].io_timer = 0
    scheduler.enqueue_blocked(1)
    scheduler.enqueue_blocked(2)
    assert scheduler.blocked == [1, 2]
    assert scheduler.table[1].io_timer == scheduler.io_time


def test_update_blocked_returns_process_to_ready():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 3)
    scheduler.table[1].state = State.BLOCK
    scheduler.enqueue_blocked(1)
    for _ in range(scheduler.io_time):
        assert scheduler.ready == []
        scheduler.update_blocked(True)
    assert scheduler.blocked == []
    assert scheduler.ready == [1]
    assert scheduler.table[1].state is State.READY


def test_update_blocked_can_skip_last():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 3)
    _add(scheduler, 2, 3)
    scheduler.enqueue_blocked(1)
    scheduler.enqueue_blocked(2)
    scheduler.update_blocked(False)
    assert scheduler.table[2].io_timer == scheduler.io_time
    assert scheduler.table[1].io_timer < scheduler.io_time
    assert scheduler.blocked == [1, 2]


def test_next_process_decisions():
    scheduler = Scheduler(3)
    assert scheduler.next_process() is None
    _add(scheduler, 1, 5)
    scheduler.enqueue_ready(1)
    assert scheduler.next_process() is False
    _add(scheduler, 2, 3)
    scheduler.enqueue_ready(2)
    assert scheduler.next_process() is False
    scheduler.table[1].credits = 1
    assert scheduler.next_process() is True


def test_has_credits_left():
    scheduler = Scheduler(3)
    _add(scheduler, 1, 0)
    _add(scheduler, 2, 0)
    scheduler.enqueue_ready(1)
    scheduler.enqueue_blocked(2)
    assert scheduler.has_credits_left() is False
    scheduler.table[2].credits = 2
    assert scheduler.has_credits_left() is True


def test_load_all_reads_programs(tmp_path):
    priorities = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    _write_programs(tmp_path, priorities)
    scheduler = Scheduler(3, tmp_path)
    log = io.StringIO()
    assert scheduler.load_all(log) is True
    assert sorted(scheduler.table) == list(range(1, 11))
    assert [scheduler.table[pid].credits for pid in range(1, 11)] == priorities
    order = _credits_order(scheduler)
    assert order == sorted(order, reverse=True)
    assert log.getvalue().splitlines()[0] == "Carregando TESTE-1"
    assert len(log.getvalue().splitlines()) == 10


def test_load_all_stops_at_missing_program(tmp_path):
    _write_programs(tmp_path, [1] * 10)
    (tmp_path / "04.txt").unlink()
    scheduler = Scheduler(3, tmp_path)
    log = io.StringIO()
    assert scheduler.load_all(log) is False
    assert sorted(scheduler.table) == [1, 2, 3]


def test_reload_credits_restores_and_sorts(tmp_path):
    priorities = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    _write_programs(tmp_path, priorities)
    scheduler = Scheduler(3, tmp_path)
    scheduler.load_all(io.StringIO())
    blocked_pid = scheduler.dequeue_ready()
    scheduler.enqueue_blocked(blocked_pid)
    for pcb in scheduler.table.values():
        pcb.credits = 0
    scheduler.ready.reverse()
    scheduler.reload_credits()
    assert [scheduler.table[pid].credits for pid in range(1, 11)] == priorities
    order = _credits_order(scheduler)
    assert order == sorted(order, reverse=True)
    assert scheduler.blocked == [blocked_pid]