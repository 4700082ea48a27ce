"""Field-level validators for coin and asset info files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from assetcheck.models import AssetModel, CoinModel, Link

REQUIRED_COIN_FIELDS: tuple[str, ...] = (
    "name",
    "type",
    "symbol",
    "decimals",
    "description",
    "website",
    "explorer",
    "status",
)

REQUIRED_ASSET_FIELDS: tuple[str, ...] = REQUIRED_COIN_FIELDS + ("id",)

ALLOWED_STATUS_VALUES: tuple[str, ...] = ("active", "spam", "abandoned")

ALLOWED_LINK_KEYS: dict[str, str] = {
    "github": "https://github.com/",
    "whitepaper": "",
    "x": "https://x.com/",
    "telegram": "",
    "telegram_news": "",  # read-only announcement channel
    "medium": "",  # url must contain medium.com
    "discord": "https://discord.com/",
    "reddit": "https://reddit.com/",
    "facebook": "https://facebook.com/",
    "youtube": "https://youtube.com/",
    "coinmarketcap": "https://coinmarketcap.com/",
    "coingecko": "https://coingecko.com/",
    "blog": "",  # blog other than medium
    "forum": "",  # community site
    "docs": "",
    "source_code": "",  # other than github
}

MAX_DESCRIPTION_LENGTH = 600
MAX_DECIMALS = 30
WHITESPACE_SEQUENCES: tuple[str, ...] = ("\n", "  ")
_ETHEREUM_NAME = "Ethereum"


class ValidationError(Exception):
    """A check on an info file failed."""


class MissingFieldError(ValidationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"missing field: {detail}")
        self.detail = detail


class InvalidFieldError(ValidationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid field: {detail}")
        self.detail = detail


class CompositeError(ValidationError):
    """Several validation failures collected together."""

    def __init__(self, errors: Iterable[Exception] = ()) -> None:
        super().__init__()
        self.errors: list[Exception] = list(errors)

    def append(self, error: Exception) -> None:
        self.errors.append(error)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[Exception]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "; ".join(str(e) for e in self.errors)


def _filled(value: str | None) -> bool:
    return value is not None and value != ""


def _raise_missing(required: tuple[str, ...], present: set[str]) -> None:
    missing = [name for name in required if name not in present]
    if missing:
        raise MissingFieldError(", ".join(missing))


def validate_asset_required_keys(asset: AssetModel) -> None:
    checks = {
        "name": _filled(asset.name),
        "symbol": _filled(asset.symbol),
        "type": _filled(asset.type),
        "decimals": asset.decimals is not None,
        "description": _filled(asset.description),
        "website": asset.website is not None,
        "explorer": _filled(asset.explorer),
        "status": _filled(asset.status),
        "id": _filled(asset.id),
    }
    _raise_missing(REQUIRED_ASSET_FIELDS, {k for k, ok in checks.items() if ok})


def validate_asset_id(asset_id: str, address: str) -> None:
    if asset_id != address:
        if asset_id.lower() != address.lower():
            raise InvalidFieldError("invalid id field")
        raise InvalidFieldError("invalid case for id field")


def validate_asset_decimals_according_type(asset_type: str, decimals: int) -> None:
    if asset_type == "BEP2" and decimals != 8:
        raise InvalidFieldError("invalid decimals field, BEP2 tokens have 8 decimals")


def validate_coin_required_keys(coin: CoinModel) -> None:
    checks = {
        "name": _filled(coin.name),
        "symbol": _filled(coin.symbol),
        "type": _filled(coin.type),
        "decimals": coin.decimals is not None,
        "description": _filled(coin.description),
        "website": _filled(coin.website),
        "explorer": _filled(coin.explorer),
        "status": _filled(coin.status),
    }
    _raise_missing(REQUIRED_COIN_FIELDS, {k for k, ok in checks.items() if ok})


def validate_links(links: Iterable[Link] | None) -> None:
    items = list(links or ())
    if len(items) < 2:
        return

    for link in items:
        if link.name is None or link.url is None:
            raise MissingFieldError("missing required fields links.url and links.name")

        if not link_name_allowed(link.name):
            raise ValidationError(
                "invalid value for links.name filed, allowed only: "
                + ", ".join(supported_link_names())
            )

        prefix = ALLOWED_LINK_KEYS[link.name]
        if prefix and not link.url.startswith(prefix):
            raise ValidationError(
                f"invalid value '{link.url}' for {link.name} link url, "
                f"allowed only with prefix: {prefix}"
            )

        if not link.url.startswith("https://"):
            raise ValidationError(
                "invalid value for links.url field, allowed only with https:// prefix"
            )

        if link.name == "medium" and "medium.com" not in link.url:
            raise ValidationError("invalid value for links.url field, should contain medium.com")


def validate_coin_type(asset_type: str) -> None:
    if asset_type != "coin":
        raise InvalidFieldError('only "coin" type allowed for coin field')


def validate_tags(tags: Iterable[str] | None, allowed_tags: Iterable[str]) -> None:
    allowed = set(allowed_tags)
    for tag in tags or ():
        if tag not in allowed:
            raise InvalidFieldError(f"tag '{tag}' not allowed")


def validate_decimals(decimals: int) -> None:
    if decimals > MAX_DECIMALS or decimals < 0:
        raise InvalidFieldError("decimals field")


def validate_status(status: str) -> None:
    if status not in ALLOWED_STATUS_VALUES:
        raise InvalidFieldError(
            "allowed status field values: " + ", ".join(ALLOWED_STATUS_VALUES)
        )


def validate_description(description: str) -> None:
    if len(description.encode("utf-8")) > MAX_DESCRIPTION_LENGTH:
        raise InvalidFieldError("invalid length for description field")

    if any(seq in description for seq in WHITESPACE_SEQUENCES):
        raise InvalidFieldError(
            "description contains not allowed characters (new line, double space)"
        )


def validate_description_website(description: str, website: str) -> None:
    if description != "-" and website == "":
        raise MissingFieldError("website field")


def explorer_url_alternatives(chain: str, name: str) -> list[str]:
    """Other explorer URLs that are accepted for a token of this name."""
    if not name:
        return []

    normalized = name.lower().replace(" ", "").replace(")", "").replace("(", "")
    urls = []
    if chain.lower() == _ETHEREUM_NAME:
        urls.append(f"https://etherscan.io/token/{normalized}")
    urls.append(f"https://explorer.{normalized}.io")
    urls.append(f"https://scan.{normalized}.io")
    return urls


def link_name_allowed(name: str) -> bool:
    return name in ALLOWED_LINK_KEYS


def supported_link_names() -> list[str]:
    return list(ALLOWED_LINK_KEYS)