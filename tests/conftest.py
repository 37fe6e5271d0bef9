import logging
import os

import pytest

from binfile.binary import BinaryFile


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


@pytest.fixture
def path_data(tmp_path):
    path = tmp_path / 'data.bin'
    path.write_bytes(bytes(range(0x10)))

    return path


@pytest.fixture
def binary():
    return BinaryFile.open(b'\x00' * 0x10)
