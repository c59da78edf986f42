# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

import click

from ..constant import LOG_LEVEL_ENV
from .auth_cmd import auth_group
from .providers_cmd import providers_group
from .status_cmd import status_cmd

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    default="warning",
    show_default=True,
    help="Log level for diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Health summary for a picoclaw-style agent setup."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(status_cmd)
cli.add_command(providers_group)
cli.add_command(auth_group)
