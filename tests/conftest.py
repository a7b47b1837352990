from __future__ import annotations

from typing import Iterator

import pytest

from bed.runtime import telemetry


@pytest.fixture(autouse=True)
def reset_telemetry() -> Iterator[None]:
    yield
    telemetry.configure(
        config=telemetry.TelemetryConfig(level="NOTSET", console=False)
    )
