"""Shared stubs for the pacman primitive."""

from typing import Dict, List, Tuple

import pytest


class StubPacman:
    """Records calls and answers from canned outputs keyed by argument tuple."""

    def __init__(self, outputs: Dict[Tuple[str, ...], str] = None,
                 successes: Dict[Tuple[str, ...], bool] = None):
        self.outputs = outputs or {}
        self.successes = successes or {}
        self.calls: List[Tuple[str, ...]] = []

    def output(self, args):
        self.calls.append(tuple(args))
        return self.outputs.get(tuple(args), "")

    def success(self, args):
        self.calls.append(tuple(args))
        return self.successes.get(tuple(args), False)

    def run(self, args):
        self.calls.append(tuple(args))


@pytest.fixture
def stub_pacman():
    """Factory for StubPacman instances."""
    return StubPacman
