"""
Handlers are the storage the typed accessor works on: something we can seek
into, read from and write to. The accessor doesn't care where the bytes live,
it only needs the four operations defined by FileHandler.
"""
import abc
import io
import logging
import os

from .enum import WriteMode
from .exceptions import CouldNotOpenException, SeekException


logger = logging.getLogger(__name__)


class FileHandler(abc.ABC):
    '''Uniform access to a seekable resource.

    All the methods but read() return the handler itself, so that it's
    possible to write

        data = handler.seek(0x10).read(4)
    '''

    def __init__(self, mode=WriteMode.OVERWRITE):
        self.mode = mode
        self.obj = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    @abc.abstractmethod
    def open(self, name) -> "FileHandler":
        pass

    def seek(self, offset: int) -> "FileHandler":
        if offset < 0:
            logger.error('trying to seek at negative offset %d' % offset)
            raise SeekException('offset must be non-negative', offset=offset)

        logger.debug('seek at 0x%x' % offset)
        self.obj.seek(offset)

        return self

    def tell(self) -> int:
        return self.obj.tell()

    def read(self, length: int):
        '''Read up to length bytes from the actual position; returns None
        only when there is nothing left to read.'''
        data = self.obj.read(length)

        logger.debug('read %d bytes (requested %d)' % (len(data), length))

        return data if len(data) else None

    def write(self, data: bytes) -> "FileHandler":
        if self.mode == WriteMode.INSERT:
            return self._insert(data)

        logger.debug('overwrite %d bytes at 0x%x' % (len(data), self.tell()))
        self.obj.write(data)

        return self

    def _insert(self, data: bytes) -> "FileHandler":
        position = self.tell()
        tail = self.obj.read()

        logger.debug('insert %d bytes at 0x%x moving %d bytes' % (len(data), position, len(tail)))

        self.obj.seek(position)
        self.obj.write(data + tail)
        self.obj.seek(position + len(data))

        return self

    def close(self):
        if self.obj is not None and not self.obj.closed:
            self.obj.close()


class FlatFileHandler(FileHandler):
    """Handler for a file on the local filesystem.

    The file must exist: it's opened for update and never truncated."""

    def open(self, name) -> FileHandler:
        logger.debug('opening path \'%s\'' % name)
        try:
            self.obj = open(name, 'rb+')
        except OSError as e:
            logger.error(e)
            raise CouldNotOpenException(f'could not open \'{name}\'') from e

        self.name = name

        return self


class MemoryFileHandler(FileHandler):
    """Handler keeping the data in memory, useful for tests and for data
    already loaded from somewhere else."""

    def open(self, name=b'') -> FileHandler:
        if not isinstance(name, (bytes, bytearray)):
            raise CouldNotOpenException(
                f'{self.__class__.__name__} needs bytes, not \'{name.__class__.__name__}\'')

        logger.debug('opening %d bytes in memory' % len(name))
        self.obj = io.BytesIO(name)

        return self

    def getvalue(self) -> bytes:
        return self.obj.getvalue()


def open_handler(obj, mode=WriteMode.OVERWRITE) -> FileHandler:
    '''Here we normalize the object in order to be accessed as a handler:
    a path is opened as a file, raw bytes are kept in memory.'''
    if isinstance(obj, FileHandler):
        return obj

    if isinstance(obj, (str, os.PathLike)):
        return FlatFileHandler(mode=mode).open(obj)

    if isinstance(obj, (bytes, bytearray)):
        return MemoryFileHandler(mode=mode).open(obj)

    raise ValueError('\'%s\' is the wrong kind of object to open' % obj.__class__.__name__)
