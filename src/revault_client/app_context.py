"""Application context shared across CLI commands."""

from dataclasses import dataclass

import typer

from revault_client.config import Config
from revault_client.daemon.errors import RevaultDError
from revault_client.output import Output
from revault_client.revaultd import RevaultD


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    def connect(self) -> RevaultD:
        """Connect to the running daemon, exiting with an error message on failure."""
        try:
            return RevaultD.connect(self.cfg)
        except RevaultDError as e:
            self.out.print_error_and_exit(e.code, str(e))


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
