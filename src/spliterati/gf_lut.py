# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Lookup tables for multiplication in GF(2**8).

Reducing polynomial x**8 + x**4 + x**3 + x + 1 (0x11B), generator 0xE5.
These are the same tables used by other implementations of this share
format, so shares are interchangeable with them.
"""

from typing import Sequence

from . import gf_util

EXP_LUT_STR = """
01 e5 4c b5 fb 9f fc 12 03 34 d4 c4 16 ba 1f 36
05 5c 67 57 3a d5 21 5a 0f e4 a9 f9 4e 64 63 ee
11 37 e0 10 d2 ac a5 29 33 59 3b 30 6d ef f4 7b
55 eb 4d 50 b7 2a 07 8d ff 26 d7 f0 c2 7e 09 8c
1a 6a 62 0b 5d 82 1b 8f 2e be a6 1d e7 9d 2d 8a
72 d9 f1 27 32 bc 77 85 96 70 08 69 56 df 99 94
a1 90 18 bb fa 7a b0 a7 f8 ab 28 d6 15 8e cb f2
13 e6 78 61 3f 89 46 0d 35 31 88 a3 41 80 ca 17
5f 53 83 fe c3 9b 45 39 e1 f5 9e 19 5e b6 cf 4b
38 04 b9 2b e2 c1 4a dd 48 0c d0 7d 3d 58 de 7c
d8 14 6b 87 47 e8 79 84 73 3c bd 92 c9 23 8b 97
95 44 dc ad 40 65 86 a2 a4 cc 7f ec c0 af 91 fd
f7 4f 81 2f 5b ea a8 1c 02 d1 98 71 ed 25 e3 24
06 68 b3 93 2c 6f 3e 6c 0a b8 ce ae 74 b1 42 b4
1e d3 49 e9 9c c8 c6 c7 22 6e db 20 bf 43 51 52
66 b2 76 60 da c5 f3 f6 aa cd 9a a0 75 54 0e 01
"""


# NOTE: LOG_LUT[0] is a placeholder, zero has no logarithm.
#   LOG_LUT[1] is 0xff rather than 0x00, both are equivalent mod 255.

LOG_LUT_STR = """
00 ff c8 08 91 10 d0 36 5a 3e d8 43 99 77 fe 18
23 20 07 70 a1 6c 0c 7f 62 8b 40 46 c7 4b e0 0e
eb 16 e8 ad cf cd 39 53 6a 27 35 93 d4 4e 48 c3
2b 79 54 28 09 78 0f 21 90 87 14 2a a9 9c d6 74
b4 7c de ed b1 86 76 a4 98 e2 96 8f 02 32 1c c1
33 ee ef 81 fd 30 5c 13 9d 29 17 c4 11 44 8c 80
f3 73 42 1e 1d b5 f0 12 d1 5b 41 a2 d7 2c e9 d5
59 cb 50 a8 dc fc f2 56 72 a6 65 2f 9f 9b 3d ba
7d c2 45 82 a7 57 b6 a3 7a 75 4f ae 3f 37 6d 47
61 be ab d3 5f b0 58 af ca 5e fa 85 e4 4d 8a 05
fb 60 b7 7b b8 26 4a 67 c6 1a f8 69 25 b3 db bd
66 dd f1 d2 df 03 8d 34 d9 92 0d 63 55 aa 49 ec
bc 95 3c 84 0b f5 e6 e7 e5 ac 7e 6e b9 f9 da 8e
9a c9 24 e1 0a 15 6b 3a a0 51 f4 ea b2 97 9e 5d
22 88 94 ce 19 01 71 4c a5 e3 c5 31 bb cc 1f 2d
3b 52 6f f6 2e 89 f7 c0 68 1b 64 04 06 bf 83 38
"""

EXP_LUT = tuple(int(val, 16) for val in EXP_LUT_STR.split())
LOG_LUT = tuple(int(val, 16) for val in LOG_LUT_STR.split())

assert len(EXP_LUT) == 256
assert len(LOG_LUT) == 256


def _format_table(table: Sequence[int]) -> str:
    lines = []
    for offset in range(0, len(table), 16):
        row = table[offset : offset + 16]
        lines.append(" ".join(f"{n:02x}" for n in row))
    return "\n".join(lines)


def main() -> None:
    """Regenerate the tables from the reference arithmetic and print them."""
    exp, log = gf_util.gen_luts(gf_util.GENERATOR)
    assert tuple(exp) == EXP_LUT
    assert tuple(log) == LOG_LUT

    print("EXP_LUT_STR = \"\"\"")
    print(_format_table(exp))
    print("\"\"\"")
    print()
    print("LOG_LUT_STR = \"\"\"")
    print(_format_table(log))
    print("\"\"\"")


if __name__ == '__main__':
    main()
