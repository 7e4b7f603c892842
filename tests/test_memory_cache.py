import time

import pytest

from rdapclient.bootstrap.cache.memory_cache import MemoryCache
from rdapclient.bootstrap.cache.registry_cache import FileState


def test_absent_file():
    cache = MemoryCache()
    assert cache.state("not-in-cache.json") is FileState.ABSENT
    with pytest.raises(FileNotFoundError):
        cache.load("not-in-cache.json")


def test_save_load_and_expire():
    cache = MemoryCache()
    test_data = bytearray(b"test")
    cache.save("file.json", test_data)

    data = cache.load("file.json")
    assert data == b"test"

    test_data[0] = ord("x")
    assert data[0:1] == b"t"
    assert cache.load("file.json") == b"test"

    assert cache.state("file.json") is FileState.GOOD

    cache.timeout = 0
    time.sleep(0.05)
    assert cache.state("file.json") is FileState.EXPIRED
    assert cache.load("file.json") == b"test"


def test_set_timeout():
    cache = MemoryCache(timeout=0)
    cache.set_timeout(3600)
    cache.save("asn.json", b"data")
    assert cache.timeout == 3600
    assert cache.state("asn.json") is FileState.GOOD