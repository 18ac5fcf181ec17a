import io
import os
from typing import Any

import pytest

from lox.lox_session import Lox

# Start coverage in subprocesses spawned by CLI tests
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


class Streams:
    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()

    def output(self) -> str:
        return self.out.getvalue()

    def errors(self) -> list[str]:
        return self.err.getvalue().splitlines()


@pytest.fixture  # type: ignore[misc]
def streams() -> Streams:
    return Streams()


@pytest.fixture  # type: ignore[misc]
def lox(streams: Streams) -> Any:
    return Lox(out=streams.out, err=streams.err)
