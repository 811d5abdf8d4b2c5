from __future__ import annotations

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    _ = config
    for item in items:
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)
