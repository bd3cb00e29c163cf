"""Dhrystone and the CoreMark list, matrix and state workloads, with self-checking results."""

__version__ = "0.1.0"