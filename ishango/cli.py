# ruff: noqa: I001
"""CLI for the ``ishango`` ledger.

This module exposes plain command handlers (``cmd_init``, ``cmd_add``, ...)
and a Typer-based console interface on top of them. Handlers take a resolved
:class:`~ishango.config.LedgerConfig`, print results to stdout and return a
process exit code; any :class:`~ishango.errors.LedgerError` is reported as
``Error: <message>`` on stderr with exit code 1.

Every command has a one-letter alias (``i``, ``a``, ``b``, ``t``, ``l``,
``w``, ``d``) that is hidden from ``--help``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import ArgumentInfo, OptionInfo

from . import aggregate, store
from .buckets import list_buckets
from .config import LedgerConfig, load_config
from .errors import LedgerError
from .logging_setup import configure_logging, get_logger

_logger = get_logger("ishango.cli")


def _fail(err: LedgerError) -> int:
    print(f"Error: {err}", file=sys.stderr)
    return 1


# ---- Command handlers --------------------------------------------------------


def cmd_init(config: LedgerConfig, bucket: str) -> int:
    """Create an empty bucket. Prints nothing on success."""

    try:
        store.init(config.data_dir, bucket)
    except LedgerError as e:
        return _fail(e)
    return 0


def cmd_add(config: LedgerConfig, bucket: str, value: float) -> int:
    """Append ``value`` to ``bucket`` stamped with the current time."""

    try:
        store.append(config.data_dir, bucket, value)
    except LedgerError as e:
        return _fail(e)
    return 0


def cmd_balance(config: LedgerConfig, bucket: str) -> int:
    """Print the sum of all parseable records with two decimals.

    Corrupt lines are skipped rather than failing the command.
    """

    try:
        total = aggregate.balance(
            store.iter_transactions(config.data_dir, bucket, tolerant=True)
        )
    except LedgerError as e:
        return _fail(e)
    print(aggregate.format_amount(total))
    return 0


def cmd_transactions(config: LedgerConfig, bucket: str) -> int:
    """Print one ``<local date> <local time> <value>`` line per record.

    Lines are emitted as they are read, so a corrupt record stops the listing
    after the lines before it have been printed.
    """

    try:
        records = store.iter_transactions(config.data_dir, bucket)
        for line in aggregate.transaction_lines(records):
            print(line)
    except LedgerError as e:
        return _fail(e)
    return 0


def cmd_list(config: LedgerConfig) -> int:
    try:
        names = list_buckets(config.data_dir)
    except LedgerError as e:
        return _fail(e)
    for name in names:
        print(name)
    return 0


def cmd_where(config: LedgerConfig) -> int:
    print(config.data_dir)
    return 0


def cmd_delta(config: LedgerConfig, bucket: str) -> int:
    """Print per-day sums in local time, earliest day first."""

    try:
        lines = list(aggregate.delta_lines(store.iter_transactions(config.data_dir, bucket)))
    except LedgerError as e:
        return _fail(e)
    for line in lines:
        print(line)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Keep named buckets of signed transactions and query balances and daily deltas.",
)

# Module-level argument object to satisfy ruff B008 (no calls in parameter
# defaults).
BUCKET_ARGUMENT: ArgumentInfo = typer.Argument(
    ...,
    metavar="BUCKET",
    help="Bucket name (letters, digits, '-' or '_').",
    show_default=False,
)

# ``add`` takes negative amounts such as ``-3.25``; without this Click would
# try to parse them as options.
_NEGATIVE_VALUE_SETTINGS = {"ignore_unknown_options": True}


def _config(ctx: typer.Context) -> LedgerConfig:
    cfg = ctx.obj
    if not isinstance(cfg, LedgerConfig):
        # Commands invoked without the root callback (e.g. embedded use).
        cfg = load_config()
        ctx.obj = cfg
    return cfg


@app.command("init", help="Create a new, empty bucket.")
def init_cmd(ctx: typer.Context, bucket: Annotated[str, BUCKET_ARGUMENT]) -> None:
    raise typer.Exit(cmd_init(_config(ctx), bucket))


@app.command("add", context_settings=_NEGATIVE_VALUE_SETTINGS, help="Append a transaction.")
def add_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, BUCKET_ARGUMENT],
    value: Annotated[float, typer.Argument(help="Signed amount, e.g. 12.5 or -3.25.")],
) -> None:
    raise typer.Exit(cmd_add(_config(ctx), bucket, value))


@app.command("balance", help="Print the bucket's balance.")
def balance_cmd(ctx: typer.Context, bucket: Annotated[str, BUCKET_ARGUMENT]) -> None:
    raise typer.Exit(cmd_balance(_config(ctx), bucket))


@app.command("transactions", help="List the bucket's transactions in local time.")
def transactions_cmd(ctx: typer.Context, bucket: Annotated[str, BUCKET_ARGUMENT]) -> None:
    raise typer.Exit(cmd_transactions(_config(ctx), bucket))


@app.command("list", help="List all buckets.")
def list_cmd(ctx: typer.Context) -> None:
    raise typer.Exit(cmd_list(_config(ctx)))


@app.command("where", help="Print the data directory.")
def where_cmd(ctx: typer.Context) -> None:
    raise typer.Exit(cmd_where(_config(ctx)))


@app.command("delta", help="Print per-day sums of the bucket's transactions.")
def delta_cmd(ctx: typer.Context, bucket: Annotated[str, BUCKET_ARGUMENT]) -> None:
    raise typer.Exit(cmd_delta(_config(ctx), bucket))


# Short aliases share the handlers above.
app.command("i", hidden=True)(init_cmd)
app.command("a", hidden=True, context_settings=_NEGATIVE_VALUE_SETTINGS)(add_cmd)
app.command("b", hidden=True)(balance_cmd)
app.command("t", hidden=True)(transactions_cmd)
app.command("l", hidden=True)(list_cmd)
app.command("w", hidden=True)(where_cmd)
app.command("d", hidden=True)(delta_cmd)


DATA_DIR_OPTION: OptionInfo = typer.Option(
    None,
    "--data-dir",
    help="Override the data directory (falls back to ISHANGO_DATA_DIR, then the platform default).",
    file_okay=False,
    dir_okay=True,
)
LOG_LEVEL_OPTION: OptionInfo = typer.Option(
    None, "--log-level", help="Logging level for diagnostics on stderr (e.g. DEBUG)."
)


@app.callback()
def _root(
    ctx: typer.Context,
    *,
    data_dir: Path | None = DATA_DIR_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding
    already-set variables), configures logging and resolves the data
    directory once for the invoked subcommand.
    """

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging(log_level)

    cfg = load_config(data_dir=data_dir, log_level=log_level, load_env_file=False)
    _logger.debug("cli:invoke command=%s data_dir=%s", ctx.invoked_subcommand, cfg.data_dir)
    ctx.obj = cfg


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    app()
