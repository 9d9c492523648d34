from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_precise.families.configuration import reset_families_register


@pytest.fixture(autouse=True)
def _fresh_family_register() -> Generator[None, Any, None]:
    """Every test starts from an empty register and a cold configuration cache."""
    reset_families_register()
    yield
    reset_families_register()
