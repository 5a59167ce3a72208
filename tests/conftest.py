import pytest

from diskfrag.managers.disk import DiskManager
from diskfrag.parser import parse_disk_map

EXAMPLE = "2333133121414131402"


@pytest.fixture
def example_map() -> str:
    return EXAMPLE


@pytest.fixture
def disk_manager() -> DiskManager:
    return DiskManager(parse_disk_map(EXAMPLE))
