'''
Functions to compose and decompose bytes, shorts and integers.

They don't need any handler: use them on the values returned by BinaryFile
or on whatever integer you have around.
'''
from typing import List

from bitstring import Bits

from .exceptions import ValueExceededException


def _check_byte(*values):
    for value in values:
        if not 0 <= value <= 0xff:
            raise ValueExceededException('Byte value exceeded')


def is_bit_set(byte: int, position: int) -> bool:
    '''Position starts from 1 for the least significant bit; a position
    outside the byte (less than 1 or greater than 8) is never set.'''
    _check_byte(byte)

    if position < 1:
        return False

    return (byte >> (position - 1)) & 1 == 1


def as_byte_array(integer: int) -> List[int]:
    '''Split the integer in its four bytes, most significant first.

    NOTE: the bytes are masked but not shifted, i.e. 0x12345678 gives
    [0x12000000, 0x340000, 0x5600, 0x78].'''
    return [
        integer & 0xff000000,
        integer & 0xff0000,
        integer & 0xff00,
        integer & 0xff,
    ]


def as_short(byte1: int, byte2: int) -> int:
    _check_byte(byte1, byte2)

    return (byte1 << 8) + byte2


def as_integer(byte1: int, byte2: int, byte3: int, byte4: int) -> int:
    _check_byte(byte1, byte2, byte3, byte4)

    return (byte1 << 24) + (byte2 << 16) + (byte3 << 8) + byte4


def extract_nibbles_from_byte(byte: int) -> List[int]:
    _check_byte(byte)

    return [_.uint for _ in Bits(uint=byte, length=8).cut(4)]


def extract_nibbles_from_short(short: int) -> List[int]:
    return extract_nibbles_from_byte((short & 0xff00) >> 8) + extract_nibbles_from_byte(short & 0x00ff)


def extract_nibbles_from_integer(integer: int) -> List[int]:
    return extract_nibbles_from_short((integer & 0xffff0000) >> 16) + extract_nibbles_from_short(integer & 0x0000ffff)
