"""Reporting for mutation testing runs: statuses, per-mutant output, summaries, thresholds and JSON findings."""

__version__ = "0.1.0"