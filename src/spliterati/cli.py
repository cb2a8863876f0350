#!/usr/bin/env python3
# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

"""CLI/Imperative shell for spliterati.

All binary values (secrets, shares, shards, keys) are read and written
as hex strings.
"""

import re
import logging
from typing import List
from typing import Tuple
from typing import Callable
from typing import Optional
from typing import Sequence
from typing import NamedTuple

import click

from . import shamir
from . import signed
from . import enc_util
from . import __version__
from . import common_types as ct

logger = logging.getLogger("spliterati.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-16s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


_PREV_VERBOSITY: int = -1


def _configure_logging(verbosity: int = 0) -> None:
    # pylint: disable=global-statement
    global _PREV_VERBOSITY

    if verbosity <= _PREV_VERBOSITY:
        # allow function to be called multiple times
        return

    _PREV_VERBOSITY = verbosity

    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def echo(msg: str = "") -> bool:
    click.echo(msg)
    return True


class Scheme(NamedTuple):

    threshold : int
    num_shares: int


def parse_scheme(scheme_arg: str) -> Scheme:
    if not re.match(r"^\d+of\d+$", scheme_arg):
        errmsg = f"Invalid parameter for --scheme={scheme_arg}. Try something like '3of5'"
        raise click.BadParameter(errmsg)

    threshold, num_shares = map(int, scheme_arg.split("of"))
    if threshold > num_shares:
        errmsg = f"Invalid parameter for --scheme={scheme_arg}"
        errmsg += ", num_shares must be larger than threshold"
        raise click.BadParameter(errmsg)

    return Scheme(threshold, num_shares)


def _parse_hex(label: str, hex_str: str) -> bytes:
    try:
        return enc_util.hex2bytes(hex_str)
    except ct.DomainError as err:
        raise click.BadParameter(f"{label}: {err}")


def _parse_hex_args(label: str, hex_strs: Sequence[str]) -> List[bytes]:
    return [_parse_hex(f"{label} {i + 1}", hex_str) for i, hex_str in enumerate(hex_strs)]


def _run(func: Callable, *args, **kwargs):
    """Call into the library, report its errors as cli errors."""
    try:
        return func(*args, **kwargs)
    except ct.CryptoError as err:
        logger.error(f"Verification failed: {err}")
        raise click.ClickException(f"Verification failed: {err}")
    except ct.DomainError as err:
        raise click.ClickException(str(err))


def _echo_values(items: Sequence[Tuple[str, str]]) -> None:
    label_len = max(len(label) for label, _ in items)
    for label, value in items:
        echo(f"{label:<{label_len}}: {value}")


DEFAULT_SCHEME = "3of5"


_opt_scheme = click.option(
    '-s',
    '--scheme',
    'scheme_arg',
    type=str,
    default=DEFAULT_SCHEME,
    show_default=True,
    help="Threshold and total Number of shares (format: TofN)",
)

_opt_signing_key = click.option(
    '-k',
    '--signing-key',
    'signing_key_hex',
    type=str,
    required=True,
    help="Signing public key (hex), as printed by generate",
)

_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)


@click.group(context_settings={'help_option_names': ["-h", "--help"]})
@_opt_verbose
def cli(verbose: int = 0) -> None:
    """CLI for spliterati."""
    _configure_logging(verbose)


@cli.command()
def version() -> None:
    """Show version number."""
    echo(f"spliterati version: {__version__}")


@cli.command()
@_opt_scheme
@_opt_verbose
@click.argument('secret_hex', required=False)
def split(
    scheme_arg: str = DEFAULT_SCHEME,
    verbose   : int = 0,
    secret_hex: Optional[str] = None,
) -> None:
    """Split a secret (hex) into shares."""
    _configure_logging(verbose)
    scheme = parse_scheme(scheme_arg)

    if secret_hex is None:
        secret_hex = click.prompt("Enter secret (hex)", hide_input=True)

    secret = _parse_hex("secret", secret_hex)
    shares = _run(shamir.split, secret, scheme.num_shares, scheme.threshold)
    for share in shares:
        echo(enc_util.bytes2hex(share))


@cli.command()
@_opt_verbose
@click.argument('shares_hex', nargs=-1)
def combine(verbose: int = 0, shares_hex: Sequence[str] = ()) -> None:
    """Combine shares (hex) into the secret.

    NOTE: With too few shares, or shares from different splits, the output
    is garbage rather than an error.
    """
    _configure_logging(verbose)
    shares = _parse_hex_args("share", shares_hex)
    secret = _run(shamir.combine, shares)
    echo(enc_util.bytes2hex(secret))


@cli.command()
@_opt_scheme
@click.option('-m', '--message', type=str, default=None, help="Message to sign with the signing key")
@click.option('--key-id', 'key_id_hex', type=str, default=None, help="Key id (hex, 16 bytes)")
@_opt_verbose
def generate(
    scheme_arg: str = DEFAULT_SCHEME,
    message   : Optional[str] = None,
    key_id_hex: Optional[str] = None,
    verbose   : int = 0,
) -> None:
    """Generate a keypair and split it into signed shards."""
    _configure_logging(verbose)
    scheme = parse_scheme(scheme_arg)

    key_id       = None if key_id_hex is None else _parse_hex("key id", key_id_hex)
    message_data = None if message    is None else message.encode('utf-8')

    bundle = _run(signed.generate, scheme.threshold, scheme.num_shares, message=message_data, key_id=key_id)

    items = [
        ("signing public key"   , enc_util.bytes2hex(bundle.signing_public_key)),
        ("encryption public key", enc_util.bytes2hex(bundle.encryption_public_key)),
        ("key id"               , enc_util.bytes2hex(bundle.key_id)),
    ]
    for i, shard_data in enumerate(bundle.shards):
        items.append((f"shard {i + 1}/{scheme.num_shares}", enc_util.bytes2hex(shard_data)))

    if bundle.signed_message is not None:
        items.append(("signed message", enc_util.bytes2hex(bundle.signed_message)))

    _echo_values(items)


@cli.command()
@_opt_signing_key
@click.option(
    '--show-secret',
    type=bool,
    is_flag=True,
    default=False,
    help="Also print the reconstructed encryption secret key",
)
@_opt_verbose
@click.argument('shards_hex', nargs=-1)
def reconstruct(
    signing_key_hex: str,
    show_secret    : bool = False,
    verbose        : int  = 0,
    shards_hex     : Sequence[str] = (),
) -> None:
    """Verify signed shards (hex) and reconstruct the encryption keypair."""
    _configure_logging(verbose)
    signing_key = _parse_hex("signing key", signing_key_hex)
    shards      = _parse_hex_args("shard", shards_hex)

    result = _run(signed.reconstruct, signing_key, shards)

    items = [
        ("key id"               , enc_util.bytes2hex(result.key_id)),
        ("encryption public key", enc_util.bytes2hex(result.encryption_key_pair.public_key)),
    ]
    if show_secret:
        items.append(("encryption secret key", enc_util.bytes2hex(result.encryption_key_pair.secret_key)))

    _echo_values(items)


@cli.command()
@_opt_signing_key
@_opt_verbose
@click.argument('signed_message_hex')
def verify(signing_key_hex: str, signed_message_hex: str, verbose: int = 0) -> None:
    """Verify a signed message (hex) and print its content."""
    _configure_logging(verbose)
    signing_key    = _parse_hex("signing key", signing_key_hex)
    signed_message = _parse_hex("signed message", signed_message_hex)

    message = _run(signed.open_message, signed_message, signing_key)
    echo(message.decode('utf-8', errors='replace'))


if __name__ == '__main__':
    cli()
