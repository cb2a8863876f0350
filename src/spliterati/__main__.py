#!/usr/bin/env python
# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT
"""
__main__ module for spliterati.

Enables use as module: $ python -m spliterati
"""


if __name__ == '__main__':
    from . import cli

    cli.cli()
