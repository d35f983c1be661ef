"""CLI entry point for revault-client."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from revault_client.app_context import AppContext
from revault_client.commands.info import info
from revault_client.commands.revocation_txs import get_revocation_txs, set_revocation_txs
from revault_client.commands.start import start
from revault_client.commands.transactions import transactions
from revault_client.commands.vaults import vaults
from revault_client.config import Config
from revault_client.log import setup_logging
from revault_client.output import Output

app = TyperPlus(package_name="revault-client")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="revaultd data directory.")] = None,
    conf: Annotated[Path | None, typer.Option("--conf", help="revaultd configuration file.")] = None,
) -> None:
    """Drive the revaultd vault wallet daemon from the terminal."""
    cfg = Config.build(data_dir, conf)
    setup_logging(cfg.log_path)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Daemon
app.command()(start)
app.command(aliases=["i"])(info)

# Vaults
app.command(aliases=["v"])(vaults)
app.command(aliases=["t"])(transactions)
app.command("get-revocation-txs")(get_revocation_txs)
app.command("set-revocation-txs")(set_revocation_txs)
