# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``shamir-audit [INPUT]``."""

from __future__ import annotations

import logging
from typing import Optional

import click

from . import policy as _policy
from .audit import AuditTrail
from .consistency import reconstruct, reconstruct_by_consensus
from .errors import ReconstructionError
from .loader import load_bundle
from .policy import LOG_LEVELS, STRATEGIES
from .report import render_json, render_report

DEFAULT_INPUT = "input.json"

EXIT_CONSISTENT = 0
EXIT_BAD_SHARES = 1
EXIT_INPUT_ERROR = 2


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", required=False, type=click.Path(dir_okay=False))
@click.option("--strategy", type=click.Choice(STRATEGIES), default=None, help="Candidate basis selection.")
@click.option("--max-bases", type=click.IntRange(min=1), default=None, help="Bases scored by the consensus strategy.")
@click.option("--strict/--no-strict", default=None, help="Fail when the declared share count does not match.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--audit-dir", type=click.Path(file_okay=False), default=None, help="Append a signed audit entry here.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None)
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: Optional[str],
    strategy: Optional[str],
    max_bases: Optional[int],
    strict: Optional[bool],
    as_json: bool,
    audit_dir: Optional[str],
    log_level: Optional[str],
) -> None:
    """Reconstruct a secret from the shares in INPUT and flag corrupt shares."""
    settings = _policy.policy
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if input_path is None:
        click.echo(f"No input file specified. Using default: {DEFAULT_INPUT}", err=True)
        input_path = DEFAULT_INPUT

    try:
        bundle = load_bundle(input_path, strict=settings.strict if strict is None else strict)
        if (strategy or settings.strategy) == "consensus":
            result = reconstruct_by_consensus(bundle.shares, bundle.k, max_bases=max_bases)
        else:
            result = reconstruct(bundle.shares, bundle.k)
    except (OSError, ReconstructionError) as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(EXIT_INPUT_ERROR)

    click.echo(render_json(result) if as_json else render_report(result))

    target = audit_dir or settings.audit_dir
    if target:
        AuditTrail(target).record_reconstruction(result, k=bundle.k, source=str(input_path))

    ctx.exit(EXIT_CONSISTENT if result.consistent else EXIT_BAD_SHARES)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
