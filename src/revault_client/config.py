"""Centralized client configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_DATA_DIR = Path.home() / ".revault"

# Networks revaultd creates a per-network data directory for
NETWORKS = ("bitcoin", "testnet", "signet", "regtest")


class Config(BaseModel):
    """Client-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="revaultd data directory")
    network: str = Field(default="bitcoin", description="Bitcoin network the daemon runs on")
    revaultd_bin: str = Field(default="revaultd", min_length=1, description="revaultd executable")
    revaultd_config_path: Path | None = Field(default=None, description="revaultd config file override")
    rpc_timeout: float | None = Field(default=None, gt=0, description="Socket timeout in seconds (None = no timeout)")
    start_timeout: float | None = Field(default=None, gt=0, description="Max wait for the daemon launcher to exit")
    probe_attempts: int = Field(default=5, ge=1, description="Readiness probe attempts after daemon start")
    probe_backoff: float = Field(default=0.2, ge=0, description="Initial delay between probe attempts in seconds")

    @computed_field(description="revaultd configuration file")
    @property
    def daemon_config_path(self) -> Path:
        """revaultd configuration file."""
        if self.revaultd_config_path is not None:
            return self.revaultd_config_path
        return self.data_dir / "revault.toml"

    @computed_field(description="Optional client TOML configuration file")
    @property
    def client_config_path(self) -> Path:
        """Optional client TOML configuration file."""
        return self.data_dir / "client.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "revault-client.log"

    def socket_path(self) -> Path:
        """Resolve the revaultd RPC socket for the configured network.

        Raises:
            ValueError: Unknown network.
            RuntimeError: Home directory cannot be determined for a ``~`` path.

        """
        if self.network not in NETWORKS:
            msg = f"unknown network '{self.network}', expected one of: {', '.join(NETWORKS)}"
            raise ValueError(msg)
        return self.data_dir.expanduser() / self.network / "revaultd_rpc"

    @staticmethod
    def build(data_dir: Path | None = None, conf_path: Path | None = None) -> "Config":
        """Build a Config from defaults, the revaultd config file, and optional client.toml.

        An explicit ``data_dir`` wins over the one found in the revaultd config.
        """
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        daemon_conf = conf_path if conf_path is not None else resolved_dir / "revault.toml"

        kwargs: dict[str, Any] = {"revaultd_config_path": conf_path}
        if daemon_conf.is_file():
            with daemon_conf.open("rb") as f:
                daemon_data = tomllib.load(f)
            if data_dir is None and isinstance(daemon_data.get("data_dir"), str):
                resolved_dir = Path(daemon_data["data_dir"]).expanduser()
                # The file just read no longer sits under the resolved data_dir
                kwargs["revaultd_config_path"] = daemon_conf
            bitcoind = daemon_data.get("bitcoind_config")
            if isinstance(bitcoind, dict) and isinstance(bitcoind.get("network"), str):
                kwargs["network"] = bitcoind["network"]
        kwargs["data_dir"] = resolved_dir

        client_conf = resolved_dir / "client.toml"
        if client_conf.is_file():
            with client_conf.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("revaultd_bin"), str):
                kwargs["revaultd_bin"] = toml_data["revaultd_bin"]
            for key in ("rpc_timeout", "start_timeout", "probe_backoff"):
                if isinstance(toml_data.get(key), int | float):
                    kwargs[key] = toml_data[key]
            if isinstance(toml_data.get("probe_attempts"), int):
                kwargs["probe_attempts"] = toml_data["probe_attempts"]

        return Config(**kwargs)
