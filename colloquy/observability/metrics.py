"""Prometheus metrics for the dialog engine."""

from prometheus_client import Counter, Histogram

# Top-level control operations (begin, continue, end, replace, cancel)
DIALOG_OPERATIONS = Counter(
    "colloquy_dialog_operations_total",
    "Total number of top-level dialog stack operations",
    labelnames=["operation", "status"],
)

# Steps executed by one propagation loop
DIALOG_PROPAGATION_STEPS = Histogram(
    "colloquy_dialog_propagation_steps",
    "Dialog invocations performed per top-level operation",
    buckets=(1, 2, 3, 4, 5, 8, 13, 21),
)

DIALOG_ERRORS = Counter(
    "colloquy_dialog_errors_total",
    "Total number of errors raised out of the dialog engine",
    labelnames=["error_type"],
)

# Turns handled by the runner
DIALOG_TURNS = Counter(
    "colloquy_dialog_turns_total",
    "Total number of turns processed by the dialog runner",
    labelnames=["status"],
)
