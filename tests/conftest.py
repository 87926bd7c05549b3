import pytest

from mtlscan.file_parser import MTLEventCollector


@pytest.fixture
def collector() -> MTLEventCollector:
    return MTLEventCollector()
