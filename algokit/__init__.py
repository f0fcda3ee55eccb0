"""Backtracking (colouring, Hamiltonian cycles, N queens, subset sums), divide-and-conquer
min/max, optimal merge cost and shortest-path algorithms."""

__version__ = "0.1.0"