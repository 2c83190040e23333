"""
polyarray: functions for batches of polynomials packed into numpy arrays.

A list of polynomials [p_0, ..., p_{L-1}] is packed into an array of shape (L, D), where entry (l, d) is the
coefficient of x^d in p_l, and D is one more than the largest degree occurring. More generally any array of shape
(α, D) is treated as a batch of polynomials indexed by α, with the degree along the last axis.

>>> A = pack([Polynomial([1, 2, 3]), Polynomial([1, 1])])
>>> A.tolist()
[[1, 2, 3], [1, 1, 0]]
>>> evaluate(A, np.array([0, 1, 2])).tolist()
[[1, 6, 17], [1, 2, 3]]
"""

from typing import Sequence

import numpy as np
import numpy.typing as npt

from .poly import Polynomial


def trim(A: npt.NDArray):
    """
    Drop the degree slots above the largest degree occurring anywhere in the batch.
    (α, D) ↦ (α, K), with K one more than that degree, or 0 for a batch of zero polynomials.
    """
    used = np.any(A != 0, axis=tuple(range(A.ndim - 1)))
    length = int(np.flatnonzero(used)[-1]) + 1 if used.any() else 0
    return A if length == A.shape[-1] else A[..., :length]


def zeropad(A: npt.NDArray, D: int):
    """Widen the degree axis to D slots, filling the new high-degree slots with zeros. (α, L) ↦ (α, D) for L ≤ D."""
    extra = D - A.shape[-1]
    if extra < 0:
        raise ValueError(f"Cannot shrink a degree axis of length {A.shape[-1]} to {D} by padding.")

    return np.pad(A, [(0, 0)] * (A.ndim - 1) + [(0, extra)])


def pack(polys: Sequence[Polynomial], dtype: npt.DTypeLike = None):
    """
    Pack a list of polynomials into a single array of shape (L, D), where L is the length of the list and D is the
    longest coefficient list occurring. Without a dtype, numpy picks one to fit the coefficients.

    >>> pack([Polynomial(), Polynomial([0, 1])]).tolist()
    [[0, 0], [0, 1]]
    """
    D = max((len(p.coeffs) for p in polys), default=0)
    rows = [list(p.coeffs) + [0] * (D - len(p.coeffs)) for p in polys]
    return np.array(rows, dtype=dtype).reshape(len(polys), D)


def unpack(A: npt.NDArray) -> list[Polynomial]:
    """
    The inverse of pack: turn each row of a 2D array back into a polynomial with plain Python coefficients.

    >>> unpack(np.array([[3, -1, 2], [0, 0, 0]]))
    [Polynomial('2*x^2-x+3'), Polynomial('0')]
    """
    assert len(A.shape) == 2, "unpack expects an array of shape (L, D)."
    return [Polynomial(row) for row in A.tolist()]


def degrees(A: npt.NDArray):
    """
    Return the degree of each polynomial in the batch, with -1 for the zero polynomial.
    (α, D) ↦ (α)

    >>> degrees(np.array([[1, 2, 0], [0, 0, 0], [0, 0, 5]])).tolist()
    [1, -1, 2]
    """
    if A.shape[-1] == 0:
        return np.full(A.shape[:-1], -1)

    nonzero = A != 0
    # Argmax finds the first True, but we want the last one: reverse the degree axis and fix up the index after.
    last = A.shape[-1] - 1 - np.argmax(nonzero[..., ::-1], axis=-1)
    return np.where(np.any(nonzero, axis=-1), last, -1)


def evaluate(A: npt.NDArray, xs):
    """
    Evaluate every polynomial in the batch at every point, by Horner's method.
    (α, D) × (β) ↦ (α, β)
    """
    xs = np.asarray(xs)
    acc = np.zeros((*A.shape[:-1], *xs.shape), dtype=np.result_type(A, xs))
    expand = (...,) + (None,) * xs.ndim
    for d in reversed(range(A.shape[-1])):
        acc = A[..., d][expand] + acc * xs

    return acc


def mul(A: npt.NDArray, B: npt.NDArray):
    """
    Calculate the products of two batches of polynomials, broadcasting along the prefix.
    (α, D) × (β, E) ↦ (α · β, D + E - 1)

    The result is not necessarily trimmed: use trim() to normalise it.

    >>> mul(np.array([1, 2, 3]), np.array([[1, 1], [0, 2]])).tolist()
    [[1, 3, 5, 3], [0, 2, 4, 6]]
    """
    *alpha, D = A.shape
    *beta, E = B.shape
    prefix = np.broadcast_shapes(tuple(alpha), tuple(beta))
    if D == 0 or E == 0:
        return np.zeros((*prefix, 0), dtype=np.result_type(A, B))

    P = D + E - 1
    parts = np.zeros((*prefix, P), dtype=np.result_type(A, B))
    for d in range(P):
        parts[..., d] = sum(A[..., i] * B[..., d - i] for i in range(d + 1) if i < D and d - i < E)

    return parts
