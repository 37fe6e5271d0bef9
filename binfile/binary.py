"""
Typed access to a handler: every operation takes the offset it works at,
seeks there and reads/writes exactly the bytes the value needs.
"""
import logging
import struct
from typing import List

from .enum import Endianess, WriteMode
from .exceptions import (
    GetValueException,
    InvalidValueSizeException,
    ValueExceededException,
)
from .streams import FileHandler, open_handler


logger = logging.getLogger(__name__)


class BinaryFile(object):
    """Read and write bytes, shorts (16 bits) and integers (32 bits) at a given offset.

    The handler is borrowed: the caller opens it and is the owner, but it's
    possible to use the instance as a context manager to close it at the end.
    """

    def __init__(self, handler: FileHandler):
        self.handler = handler

    @classmethod
    def open(cls, obj, mode=WriteMode.OVERWRITE):
        return cls(open_handler(obj, mode=mode))

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.handler.close()

    @staticmethod
    def get_format(code, endian):
        return '%s%s' % ('<' if endian == Endianess.LITTLE_ENDIAN else '>', code)

    def _read(self, offset, length):
        data = self.handler.seek(offset).read(length)

        if data is None:
            logger.error('no data at offset 0x%x' % offset)
            raise GetValueException('no data to read', offset=offset)

        return data

    def _get_value(self, offset, code, endian):
        size = struct.calcsize(code)
        data = self._read(offset, size)

        if len(data) > size:
            logger.error('expected %d bytes at offset 0x%x, got %d' % (size, offset, len(data)))
            raise InvalidValueSizeException('Invalid size of value', offset=offset)

        # a truncated resource is tolerated at its end
        data = data.rjust(size, b'\x00')

        return struct.unpack(self.get_format(code, endian), data)[0]

    def _set_value(self, offset, code, value, endian, name):
        limit = (1 << (8 * struct.calcsize(code))) - 1
        if not 0 <= value <= limit:
            logger.error('%s value 0x%x doesn\'t fit at offset 0x%x' % (name, value, offset))
            raise ValueExceededException(f'{name} value exceeded', offset=offset)

        self.handler.seek(offset).write(struct.pack(self.get_format(code, endian), value))

    def get_byte(self, offset: int) -> int:
        return self._read(offset, 1)[0]

    def set_byte(self, offset: int, value: int) -> None:
        self._set_value(offset, 'B', value, Endianess.LITTLE_ENDIAN, 'Byte')

    def get_short(self, offset: int, endian=Endianess.LITTLE_ENDIAN) -> int:
        return self._get_value(offset, 'H', endian)

    def set_short(self, offset: int, value: int, endian=Endianess.LITTLE_ENDIAN) -> None:
        self._set_value(offset, 'H', value, endian, 'Short')

    def get_integer(self, offset: int, endian=Endianess.LITTLE_ENDIAN) -> int:
        return self._get_value(offset, 'I', endian)

    def set_integer(self, offset: int, value: int, endian=Endianess.LITTLE_ENDIAN) -> None:
        self._set_value(offset, 'I', value, endian, 'Integer')

    def get_bytes_as_string(self, offset: int, length: int) -> bytes:
        '''Read up to "length" bytes: the result can be shorter if the resource
        ends before, check its length if it matters.'''
        return self._read(offset, length)

    def get_bytes_as_string_until_terminator(self, offset: int, terminator: int) -> bytes:
        '''Read one byte at a time until the terminator is found; the terminator
        is part of the returned value.

        There is no maximum length: if the terminator is missing the whole
        resource is scanned and GetValueException is raised at its end.'''
        self.handler.seek(offset)

        data = []
        while True:
            b = self.handler.read(1)

            if b is None:
                logger.error('terminator 0x%02x not found starting from 0x%x' % (terminator, offset))
                raise GetValueException('terminator not found', offset=offset)

            data.append(b)

            if b[0] == terminator:
                break

        return b''.join(data)

    def get_bytes(self, offset: int, length: int) -> List[int]:
        return list(self.get_bytes_as_string(offset, length))
