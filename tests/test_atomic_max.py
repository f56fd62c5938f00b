import threading

import pytest

from parallab.atomic_max import AtomicMax, main

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def test_integer_updates():
    max_int = AtomicMax(0)
    assert max_int.value == 0
    max_int.update(10)
    assert max_int.value == 10
    max_int.update(5)
    assert max_int.value == 10
    max_int.update(15)
    assert max_int.value == 15


def test_floating_point_updates():
    max_double = AtomicMax(0.0)
    assert max_double.value == 0.0
    max_double.update(3.14)
    assert max_double.value == 3.14
    max_double.update(2.71)
    assert max_double.value == 3.14
    max_double.update(4.25)
    assert max_double.value == 4.25


def test_edge_cases():
    max_int = AtomicMax(INT_MIN)
    assert max_int.value == INT_MIN
    max_int.update(INT_MAX)
    assert max_int.value == INT_MAX
    max_int.update(INT_MIN)
    assert max_int.value == INT_MAX


def test_thread_safety():
    num_threads = 10
    iterations = 1000
    global_max = AtomicMax(0)
    barrier = threading.Barrier(num_threads)

    def worker(i):
        base = (i + 1) * iterations
        barrier.wait()
        for j in range(iterations):
            global_max.update(base + j)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(num_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert global_max.value == num_threads * iterations + iterations - 1


def test_initial_value_is_maximum():
    max_int = AtomicMax(100)
    max_int.update(50)
    assert max_int.value == 100


def test_initial_value_is_minimum():
    max_int = AtomicMax(0)
    max_int.update(100)
    assert max_int.value == 100


def test_unsigned_like_values():
    max_unsigned = AtomicMax(0)
    max_unsigned.update(100)
    assert max_unsigned.value == 100


def test_large_values():
    max_large = AtomicMax(0)
    max_large.update(1_000_000_000_000)
    assert max_large.value == 1_000_000_000_000


@pytest.mark.parametrize("bad", ["text", None, True, [1]])
def test_non_arithmetic_rejected(bad):
    with pytest.raises(TypeError):
        AtomicMax(bad)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Initial max value: 0",
        "After update with 10: 10",
        "After update with 5: 10",
        "After update with 15: 15",
    ]