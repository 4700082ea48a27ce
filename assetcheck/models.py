"""Data models for info.json files, processing steps and trading pairs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

_LIST_KINDS = ("tags", "links")


def _opt(key: str, kind: str = "str") -> Any:
    return field(default=None, metadata={"json": key, "kind": kind})


def _text(key: str) -> Any:
    return field(default="", metadata={"json": key, "kind": "text"})


def _seq(key: str, kind: str) -> Any:
    return field(default_factory=list, metadata={"json": key, "kind": kind})


def _decode(kind: str, key: str, value: Any) -> Any:
    if value is None:
        if kind == "text":
            return ""
        return [] if kind in _LIST_KINDS else None
    if kind in ("str", "text"):
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string")
        return value
    if kind == "int":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {key!r} must be an integer")
        return value
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    if kind == "tags":
        if not all(isinstance(v, str) for v in value):
            raise ValueError(f"field {key!r} must hold strings")
        return list(value)
    return [Link.from_dict(item) for item in value]


def _load(cls: type, data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__} data must be an object")
    return cls(
        **{
            f.name: _decode(f.metadata["kind"], f.metadata["json"], data.get(f.metadata["json"]))
            for f in fields(cls)
        }
    )


def _dump(obj: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        kind = f.metadata["kind"]
        if value is None or (kind == "text" and value == ""):
            continue
        if kind in _LIST_KINDS:
            if not value:
                continue
            value = [v.to_dict() for v in value] if kind == "links" else list(value)
        result[f.metadata["json"]] = value
    return result


@dataclass
class Link:
    name: str | None = _opt("name")
    url: str | None = _opt("url")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Link:
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class CoinModel:
    name: str | None = _opt("name")
    website: str | None = _opt("website")
    description: str | None = _opt("description")
    explorer: str | None = _opt("explorer")
    research: str = _text("research")
    symbol: str | None = _opt("symbol")
    type: str | None = _opt("type")
    decimals: int | None = _opt("decimals", "int")
    status: str | None = _opt("status")
    tags: list[str] = _seq("tags", "tags")
    links: list[Link] = _seq("links", "links")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinModel:
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class AssetModel:
    name: str | None = _opt("name")
    symbol: str | None = _opt("symbol")
    type: str | None = _opt("type")
    decimals: int | None = _opt("decimals", "int")
    description: str | None = _opt("description")
    website: str | None = _opt("website")
    explorer: str | None = _opt("explorer")
    research: str = _text("research")
    status: str | None = _opt("status")
    id: str | None = _opt("id")
    links: list[Link] = _seq("links", "links")
    short_desc: str | None = _opt("short_desc")
    audit: str | None = _opt("audit")
    audit_report: str | None = _opt("audit_report")
    tags: list[str] = _seq("tags", "tags")
    code: str | None = _opt("code")
    ticker: str | None = _opt("ticker")
    explorer_eth: str | None = _opt("explorer-ETH")
    address: str | None = _opt("address")
    x: str | None = _opt("x")
    coinmarketcap: str | None = _opt("coinmarketcap")
    data_source: str | None = _opt("data_source")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AssetModel:
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)

    def status_text(self) -> str:
        """The status, or an empty string when none is set."""
        return self.status if self.status is not None else ""


@dataclass
class Validator:
    name: str
    run: Callable[[Any], None]


@dataclass
class Fixer:
    name: str
    run: Callable[[Any], None]


@dataclass
class Updater:
    name: str
    run: Callable[[], None]


@dataclass
class ForceListPair:
    token0: str
    token1: str


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class TokenInfo:
    id: str = ""
    symbol: str = ""
    name: str = ""
    decimals: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TokenInfo:
        if not isinstance(data, Mapping):
            raise ValueError("token data must be an object")
        return cls(
            id=_string(data, "id"),
            symbol=_string(data, "symbol"),
            name=_string(data, "name"),
            decimals=_string(data, "decimals"),
        )


@dataclass
class TradingPair:
    id: str = ""
    reserve_usd: str = ""
    volume_usd: str = ""
    tx_count: str = ""
    token0: TokenInfo | None = None
    token1: TokenInfo | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TradingPair:
        if not isinstance(data, Mapping):
            raise ValueError("pair data must be an object")
        token0 = data.get("token0")
        token1 = data.get("token1")
        return cls(
            id=_string(data, "id"),
            reserve_usd=_string(data, "reserveUSD"),
            volume_usd=_string(data, "volumeUSD"),
            tx_count=_string(data, "txCount"),
            token0=TokenInfo.from_dict(token0) if token0 is not None else None,
            token1=TokenInfo.from_dict(token1) if token1 is not None else None,
        )


@dataclass
class TradingPairs:
    pairs: list[TradingPair] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TradingPairs:
        if not isinstance(data, Mapping):
            raise ValueError("pairs data must be an object")
        inner = data.get("data") or {}
        if not isinstance(inner, Mapping):
            raise ValueError("field 'data' must be an object")
        pairs = inner.get("pairs") or []
        if not isinstance(pairs, list):
            raise ValueError("field 'pairs' must be a list")
        return cls(pairs=[TradingPair.from_dict(p) for p in pairs])