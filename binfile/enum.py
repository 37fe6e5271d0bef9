from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class WriteMode(Enum):
    '''It indicates what happens to the data under the cursor when writing'''
    OVERWRITE = 0
    INSERT    = auto()
