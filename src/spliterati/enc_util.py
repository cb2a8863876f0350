# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""Helper functions related to data/type encoding/decoding."""

import base64
import binascii

from . import common_types as ct


def bytes2hex(data: bytes) -> str:
    """Convert bytes to a hex string."""
    return base64.b16encode(data).decode('ascii').lower()


def hex2bytes(hex_str: str) -> bytes:
    """Convert a hex string to bytes.

    Whitespace is ignored, so that copied values can be pasted as is.
    """
    hex_str = "".join(hex_str.split()).upper()
    if len(hex_str) % 2 != 0:
        raise ct.DomainError(f"Invalid hex string, odd number of digits: {len(hex_str)}")

    try:
        return base64.b16decode(hex_str.encode('ascii'))
    except (binascii.Error, UnicodeEncodeError) as err:
        raise ct.DomainError(f"Invalid hex string: {err}") from err
