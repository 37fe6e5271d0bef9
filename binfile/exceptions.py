class BinfileException(Exception):
    '''Base class to extend in order to throw exception in binfile.

    It takes an optional message and the offset of the access that
    caused the exception (None when the error is not tied to a position).
    '''

    def __init__(self, msg=None, offset=None):
        self.offset = offset
        if msg is None:
            super().__init__()
        else:
            super().__init__(msg)


class CouldNotOpenException(BinfileException):
    pass


class SeekException(BinfileException):
    pass


class GetValueException(BinfileException):
    '''No data at all was available at the requested offset.'''
    pass


class ValueExceededException(BinfileException):
    '''The value doesn't fit the width it has to be stored into.'''
    pass


class InvalidValueSizeException(BinfileException):
    '''The store returned more bytes than the value needs: this happens only
    with a handler that doesn't respect the length passed to read().'''
    pass
