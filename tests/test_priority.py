import pytest

from estruturas.priority import JobQueue, PriorityQueue, format_table, main


def _filled(pairs):
    queue = PriorityQueue()
    for content, priority in pairs:
        queue.add(content, priority)
    return queue


PAIRS = [("lavar", 3), ("comprar", 1), ("ler", 2), ("dormir", 1)]


def test_add_keeps_insertion_order():
    queue = _filled(PAIRS)
    assert [(e.content, e.priority) for e in queue] == PAIRS
    assert len(queue) == len(PAIRS)


def test_add_negative_priority_raises():
    with pytest.raises(ValueError):
        PriorityQueue().add("x", -1)


def test_sort_orders_by_priority():
    queue = _filled(PAIRS)
    queue.sort()
    priorities = [e.priority for e in queue]
    assert priorities == sorted(p for _, p in PAIRS)
    assert sorted(e.content for e in queue) == sorted(c for c, _ in PAIRS)


def test_sort_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().sort()


def test_dequeue_returns_front():
    queue = _filled(PAIRS)
    front = queue.dequeue()
    assert (front.content, front.priority) == PAIRS[0]
    assert len(queue) == len(PAIRS) - 1


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().dequeue()


def test_find():
    queue = _filled(PAIRS)
    assert queue.find("ler") == 2
    assert queue.find("nada") is None


def test_job_queue_orders_by_priority_then_arrival():
    queue = JobQueue()
    for job_id, priority in [(1, 5), (2, 1), (3, 5), (4, 3)]:
        queue.enqueue(job_id, priority)
    assert [job.job_id for job in queue] == [2, 4, 1, 3]


def test_job_queue_priorities_non_decreasing():
    queue = JobQueue()
    for job_id, priority in enumerate([4, 0, 9, 4, 2, 7]):
        queue.enqueue(job_id, priority)
    priorities = [job.priority for job in queue]
    assert all(a <= b for a, b in zip(priorities, priorities[1:]))


def test_job_queue_dequeue():
    queue = JobQueue()
    queue.enqueue(10, 2)
    queue.enqueue(11, 1)
    assert queue.dequeue().job_id == 11
    assert queue.dequeue().job_id == 10
    with pytest.raises(IndexError):
        queue.dequeue()


def test_format_table_layout():
    lines = format_table([("tarefa", 4)]).splitlines()
    assert lines[0] == "+-------+--------------------------+------------+"
    assert lines[1] == "| Ordem |         Elemento         | Prioridade |"
    assert lines[3].startswith("|     1 | tarefa ")
    assert len(lines[3]) == len(lines[0])
    assert lines[-1] == lines[0]


def test_format_table_empty_has_only_frame():
    assert len(format_table([]).splitlines()) == 4


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_main_adds_and_prints(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "tarefa", "3", "0", "", "5", "", "0"])
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "| tarefa " in output
    assert "Elemento(s) adicionado(s) com sucesso" in output
    assert output.rstrip().endswith("Saindo...")


def test_main_job_menu(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "7", "2", "2", "0"])
    assert main(["--jobs"]) == 0
    output = capsys.readouterr().out
    assert "Desenfileirada a tarefa 7!" in output