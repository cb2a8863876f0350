# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT
"""Spliterati: threshold secret splitting.

A cli app and library to split secrets with shamir secret sharing over
GF(2**8), and to distribute a keypair across custodians as signed shards.
"""

__version__ = "2022.1001b0"
