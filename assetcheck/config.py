"""Configuration settings for the asset repository checks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

STAKING_CHAINS: tuple[str, ...] = (
    "tezos",
    "cosmos",
    "iotex",
    "tron",
    "waves",
    "kava",
    "terra",
    "binance",
)


@dataclass
class App:
    log_level: str = ""


@dataclass
class BinanceURLs:
    dex: str = ""
    explorer: str = ""


@dataclass
class ClientURLs:
    binance: BinanceURLs = field(default_factory=BinanceURLs)
    assets_manager_api: str = ""


@dataclass
class URLs:
    assets_app: str = ""
    logo: str = ""


@dataclass
class RootFolder:
    allowed_files: list[str] = field(default_factory=list)
    skip_files: list[str] = field(default_factory=list)
    skip_dirs: list[str] = field(default_factory=list)


@dataclass
class ChainFolder:
    allowed_files: list[str] = field(default_factory=list)


@dataclass
class AssetFolder:
    allowed_files: list[str] = field(default_factory=list)


@dataclass
class ChainInfoFolder:
    has_files: list[str] = field(default_factory=list)


@dataclass
class ChainValidatorsAssetFolder:
    has_files: list[str] = field(default_factory=list)


@dataclass
class DappsFolder:
    ext: str = ""


@dataclass
class Tag:
    id: str = ""
    name: str = ""
    description: str = ""


@dataclass
class CoinInfoFile:
    tags: list[Tag] = field(default_factory=list)


@dataclass
class ValidatorsSettings:
    root_folder: RootFolder = field(default_factory=RootFolder)
    chain_folder: ChainFolder = field(default_factory=ChainFolder)
    asset_folder: AssetFolder = field(default_factory=AssetFolder)
    chain_info_folder: ChainInfoFolder = field(default_factory=ChainInfoFolder)
    chain_validators_asset_folder: ChainValidatorsAssetFolder = field(
        default_factory=ChainValidatorsAssetFolder
    )
    dapps_folder: DappsFolder = field(default_factory=DappsFolder)


@dataclass
class Config:
    app: App = field(default_factory=App)
    client_urls: ClientURLs = field(default_factory=ClientURLs)
    urls: URLs = field(default_factory=URLs)
    time_format: str = ""
    validators_settings: ValidatorsSettings = field(default_factory=ValidatorsSettings)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"config section {key!r} must be a mapping")
    return value


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"config value {key!r} must be a string")
    return value


def _texts(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"config value {key!r} must be a list of strings")
    return list(value)


def config_from_mapping(data: Mapping[str, Any]) -> Config:
    """Build a Config from a nested mapping such as parsed YAML."""
    if not isinstance(data, Mapping):
        raise TypeError("configuration must be a mapping")

    app = _section(data, "app")
    clients = _section(data, "client_urls")
    binance = _section(clients, "binance")
    urls = _section(data, "urls")
    settings = _section(data, "validators_settings")
    root = _section(settings, "root_folder")

    return Config(
        app=App(log_level=_text(app, "log_level")),
        client_urls=ClientURLs(
            binance=BinanceURLs(dex=_text(binance, "dex"), explorer=_text(binance, "explorer")),
            assets_manager_api=_text(clients, "assets_manager_api"),
        ),
        urls=URLs(assets_app=_text(urls, "assets_app"), logo=_text(urls, "logo")),
        time_format=_text(data, "time_format"),
        validators_settings=ValidatorsSettings(
            root_folder=RootFolder(
                allowed_files=_texts(root, "allowed_files"),
                skip_files=_texts(root, "skip_files"),
                skip_dirs=_texts(root, "skip_dirs"),
            ),
            chain_folder=ChainFolder(
                allowed_files=_texts(_section(settings, "chain_folder"), "allowed_files")
            ),
            asset_folder=AssetFolder(
                allowed_files=_texts(_section(settings, "asset_folder"), "allowed_files")
            ),
            chain_info_folder=ChainInfoFolder(
                has_files=_texts(_section(settings, "chain_info_folder"), "has_files")
            ),
            chain_validators_asset_folder=ChainValidatorsAssetFolder(
                has_files=_texts(
                    _section(settings, "chain_validators_asset_folder"), "has_files"
                )
            ),
            dapps_folder=DappsFolder(ext=_text(_section(settings, "dapps_folder"), "ext")),
        ),
    )


def load_config(path: str | Path) -> Config:
    """Read a YAML configuration file, resolving the path to an absolute one."""
    resolved = Path(path).resolve()
    with resolved.open(encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return config_from_mapping(data or {})


def is_staking_chain(chain_handle: str) -> bool:
    """Tell whether the chain with this handle publishes a validators list."""
    return chain_handle in STAKING_CHAINS