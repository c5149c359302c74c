"""Loader configuration read from raven.ini."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .ini import IniParser

DEFAULT_CONFIG_FILE = "raven.ini"

_ACCOUNT_SECTION = "Account"
_ACCOUNT_USER = "Username"
_ACCOUNT_CREDENTIAL = "Password"


@dataclass
class RavenConfig:
    # [Account]
    username: str = field(default_factory=str)
    password: str = field(default_factory=str)
    # [DedicatedServer]
    online_config_service_address: str = field(default_factory=str)
    # [Network]
    client_ip: str = field(default_factory=str)
    # [Hooks]
    patch_online_config_service_address: bool = False
    log_hermes_events: bool = False
    log_rmc_events: bool = False


def config_from_parser(parser: IniParser) -> RavenConfig:
    """Build a RavenConfig from an already loaded parser."""
    password = parser.get_string(_ACCOUNT_SECTION, _ACCOUNT_CREDENTIAL)
    return RavenConfig(
        username=parser.get_string(_ACCOUNT_SECTION, _ACCOUNT_USER),
        password=password,
        online_config_service_address=parser.get_string(
            "DedicatedServer", "OnlineConfigService"
        ),
        client_ip=parser.get_string("Network", "IP"),
        patch_online_config_service_address=parser.get_bool(
            "Hooks", "PatchOnlineConfigServiceAddress"
        ),
        log_hermes_events=parser.get_bool("Hooks", "LogHermesEvents"),
        log_rmc_events=parser.get_bool("Hooks", "LogRMCEvents"),
    )


def load_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_FILE) -> RavenConfig:
    """Load the configuration file; raises OSError if it cannot be read."""
    parser = IniParser()
    parser.load(path)
    return config_from_parser(parser)