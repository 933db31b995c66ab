# digest_catalog/cli/cli.py
"""
digest-catalog command line.

    digest-catalog [OPTIONS] DIGEST_TYPE DIRECTORY CATALOG

Prints one ``<file> <ALGO> <digest> <STATUS>`` line per regular file in
DIRECTORY and writes newly seen digests back into the CATALOG document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from digest_catalog.config import ReconcileConfig, load_config
from digest_catalog.digest import SUPPORTED_ALGORITHMS, normalize_algorithm
from digest_catalog.exceptions import DigestCatalogError, UnsupportedAlgorithmError, UsageError
from digest_catalog.logging import configure_logging, get_logger
from digest_catalog.logging.tags import CLI
from digest_catalog.reconcile import FileResult, run_reconciliation

from .ui import ui

app = typer.Typer(
    help="Compute file digests and reconcile them against an XML catalog.",
    add_completion=False,
)
logger = get_logger(__name__)

USAGE = "Usage: digest-catalog <DIGEST_TYPE> <DIRECTORY> <CATALOG>"
SUPPORTED_HINT = f"Supported digest types: {', '.join(SUPPORTED_ALGORITHMS)}"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_arguments(positional: List[Optional[Any]], extra: List[str]) -> None:
    given = [value for value in positional if value is not None]
    if len(given) != len(positional) or extra:
        raise UsageError(f"expected 3 arguments, got {len(given) + len(extra)}")


def _log_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def _resolve_config(
        config_path: Optional[Path],
        strict_algorithm: bool,
        skip_unreadable: bool,
) -> ReconcileConfig:
    config = load_config(config_path)

    # Flags only switch settings on; the config file decides otherwise
    overrides: Dict[str, Any] = {}
    if strict_algorithm:
        overrides["strict_algorithm"] = True
    if skip_unreadable:
        overrides["skip_unreadable"] = True

    return config.model_copy(update=overrides) if overrides else config


def _print_result(result: FileResult) -> None:
    typer.echo(result.line)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    digest_type: Optional[str] = typer.Argument(
        None,
        metavar="DIGEST_TYPE",
        help="Digest algorithm: MD5, SHA1, SHA256 or SHA512 (case-insensitive).",
        show_default=False,
    ),
    directory: Optional[Path] = typer.Argument(
        None,
        metavar="DIRECTORY",
        help="Directory whose regular files are digested (not recursive).",
        show_default=False,
    ),
    catalog: Optional[Path] = typer.Argument(
        None,
        metavar="CATALOG",
        help="XML catalog of known digests. Created if missing.",
        show_default=False,
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file overriding the default settings.",
    ),
    strict_algorithm: bool = typer.Option(
        False,
        "--strict-algorithm",
        help="Match only against the digest recorded for DIGEST_TYPE.",
    ),
    skip_unreadable: bool = typer.Option(
        False,
        "--skip-unreadable",
        help="Skip files that cannot be read instead of aborting.",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log progress to stderr (-vv for debug).",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors.",
    ),
) -> None:
    """
    Digest every file in DIRECTORY and reconcile it against CATALOG.
    """
    try:
        _check_arguments([digest_type, directory, catalog], list(ctx.args))
    except UsageError:
        typer.echo(USAGE)
        typer.echo(SUPPORTED_HINT)
        raise typer.Exit(1)

    try:
        algorithm = normalize_algorithm(digest_type)
    except UnsupportedAlgorithmError:
        typer.echo(f"Unsupported digest type: {digest_type}")
        typer.echo(SUPPORTED_HINT)
        raise typer.Exit(1)

    configure_logging(_log_level(verbose, quiet))

    try:
        config = _resolve_config(config_path, strict_algorithm, skip_unreadable)
        logger.info(
            f"{CLI} Reconciling directory='{directory}' catalog='{catalog}' "
            f"(algorithm={algorithm}, strict={config.strict_algorithm})"
        )
        summary = run_reconciliation(
            directory,
            catalog,
            algorithm,
            config=config,
            on_result=_print_result,
        )
    except DigestCatalogError as exc:
        ui.error(str(exc))
        raise typer.Exit(1)

    if summary.errors:
        ui.warning(f"{summary.errors} file(s) could not be read", detail="skipped")
    if verbose:
        ui.info(str(summary))


def main() -> None:
    app(prog_name="digest-catalog")


if __name__ == "__main__":
    main()
