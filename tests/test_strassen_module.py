import logging

import numpy as np
import pytest

from strassen_shared.errors import DimensionMismatch, InvalidDimension
from strassen_shared.strassen_module import check_reducible, strassen, strassen_square


@pytest.mark.parametrize("n", [1, 2, 3, 5, 17, 128])
@pytest.mark.parametrize("scheme", ["pow2", "even"])
def test_matches_naive_product(n, scheme, random_pair, reference):
    A, B = random_pair(n)
    C = strassen(A, B, threshold=4, scheme=scheme)
    assert C.shape == (n, n)
    assert np.allclose(C, reference(A, B), rtol=1e-6, atol=1e-6)


@pytest.mark.parametrize("n", [3, 8, 17])
def test_pure_recursion_to_scalars(n, random_pair):
    A, B = random_pair(n)
    C = strassen(A, B, threshold=1)
    assert np.allclose(C, A @ B, rtol=1e-6, atol=1e-6)


def test_two_by_two_example():
    A = np.array([[1.0, 2.0], [3.0, 4.0]])
    B = np.array([[5.0, 6.0], [7.0, 8.0]])
    assert np.array_equal(strassen(A, B, threshold=1), [[19.0, 22.0], [43.0, 50.0]])


def test_identity_times_matrix_is_exact_for_odd_size():
    B = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    assert np.array_equal(strassen(np.eye(3), B, threshold=1), B)


@pytest.mark.parametrize("n", [4, 7, 20])
def test_identity_and_zero_laws(n, random_pair):
    A, _ = random_pair(n)
    assert np.allclose(strassen(A, np.eye(n), threshold=2), A, atol=1e-6)
    assert not strassen(A, np.zeros((n, n)), threshold=2).any()


def test_accepts_nested_lists():
    C = strassen([[1, 2], [3, 4]], [[5, 6], [7, 8]], threshold=1)
    assert C.dtype == np.float64
    assert C.tolist() == [[19.0, 22.0], [43.0, 50.0]]


def test_repeated_runs_are_bit_identical(random_pair):
    A, B = random_pair(128)
    first = strassen(A, B, threshold=16)
    for _ in range(3):
        assert np.array_equal(strassen(A, B, threshold=16), first)


def test_aggregate_error_on_128(random_pair, reference):
    A, B = random_pair(128)
    C = strassen(A, B, threshold=8)
    assert np.abs(C - reference(A, B)).max() < 1e-1


def test_fork_join_matches_sequential(random_pair):
    A, B = random_pair(64)
    seq = strassen(A, B, threshold=4, parallel_depth=0)
    par = strassen(A, B, threshold=4, parallel_depth=2)
    assert np.array_equal(par, seq)


def test_inputs_are_not_modified(random_pair):
    A, B = random_pair(5)
    A0, B0 = A.copy(), B.copy()
    strassen(A, B, threshold=1)
    assert np.array_equal(A, A0) and np.array_equal(B, B0)


def test_mismatched_sizes_rejected_before_work(monkeypatch):
    calls = []
    monkeypatch.setattr("strassen_shared.strassen_module.strassen_square",
                        lambda *a, **k: calls.append(a))
    with pytest.raises(DimensionMismatch):
        strassen(np.zeros((4, 4)), np.zeros((5, 5)))
    assert calls == []


def test_empty_matrix_rejected():
    with pytest.raises(InvalidDimension):
        strassen(np.zeros((0, 0)), np.zeros((0, 0)))


def test_engine_refuses_odd_split():
    with pytest.raises(InvalidDimension):
        strassen_square(np.ones((6, 6)), np.ones((6, 6)), threshold=1)


@pytest.mark.parametrize("n,threshold", [(12, 3), (64, 1), (5, 8)])
def test_check_reducible_accepts(n, threshold):
    check_reducible(n, threshold)


@pytest.mark.parametrize("n,threshold", [(12, 2), (0, 4), (4, 0)])
def test_check_reducible_rejects(n, threshold):
    with pytest.raises(InvalidDimension):
        check_reducible(n, threshold)


def test_logs_padding(caplog, random_pair):
    A, B = random_pair(3)
    with caplog.at_level(logging.DEBUG, logger="strassen"):
        strassen(A, B, threshold=1)
    assert "Padding from 3 to 4" in caplog.text
    assert "[depth=2] base n=1" in caplog.text


def test_engine_rejects_mismatched_operands_up_front(monkeypatch):
    calls = []
    monkeypatch.setattr("strassen_shared.strassen_module._products",
                        lambda *a: calls.append(a))
    with pytest.raises(DimensionMismatch):
        strassen_square(np.ones((4, 4)), np.ones((8, 8)), threshold=1)
    with pytest.raises(DimensionMismatch):
        strassen_square(np.ones((4, 2)), np.ones((4, 2)), threshold=1)
    assert calls == []
