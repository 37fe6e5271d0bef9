"""
# binfile: typed access to binary files.

Parsing a binary format (a ROM, an archive, a container) usually means jumping
around the file and reading values of a given size at a given position. This
package gives the two building blocks for that:

 1. BinaryFile (in binfile.binary): read and write bytes, shorts (16 bits),
    integers (32 bits) and runs of bytes at an explicit offset, choosing the
    endianess of the multi-byte values. It works on top of a handler.

 2. the helpers (in binfile.helpers): pure functions to test bits and to
    compose/decompose integers into bytes and nibbles.

A handler (in binfile.streams) is whatever can be opened, seeked, read and
written: a file on disk (FlatFileHandler) or some bytes in memory
(MemoryFileHandler). Writing can overwrite the data under the cursor or
insert before it (see WriteMode).

    with BinaryFile.open('rom.bin') as rom:
        magic = rom.get_bytes_as_string(0x00, 4)
        entry = rom.get_integer(0x18, endian=Endianess.BIG_ENDIAN)
"""
