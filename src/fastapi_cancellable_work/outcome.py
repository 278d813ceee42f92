"""Completed and Cancelled — the two terminal outcomes of a request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Completed:
    """The timer won: ``body`` is written to the client."""

    body: bytes
    elapsed_ms: float


@dataclass(frozen=True)
class Cancelled:
    """The client went away first: nothing is written."""

    elapsed_ms: float


Outcome = Completed | Cancelled
