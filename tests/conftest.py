from __future__ import annotations

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

import pytest
from PIL import Image


@pytest.fixture()
def executor() -> Iterator[ThreadPoolExecutor]:
    pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="test-inference")
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture()
def photo() -> Image.Image:
    return Image.new("RGB", (320, 240), color=(120, 90, 60))
