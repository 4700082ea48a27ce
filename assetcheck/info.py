"""Whole-file validation of asset and coin info.json models."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from assetcheck.fields import (
    CompositeError,
    ValidationError,
    validate_asset_decimals_according_type,
    validate_asset_id,
    validate_asset_required_keys,
    validate_coin_required_keys,
    validate_coin_type,
    validate_decimals,
    validate_description,
    validate_description_website,
    validate_links,
    validate_status,
    validate_tags,
)
from assetcheck.models import AssetModel, CoinModel


def _collect(checks: Iterable[Callable[[], None]]) -> None:
    """Run every check and raise all failures together as one CompositeError."""
    composite = CompositeError()
    for check in checks:
        try:
            check()
        except ValidationError as err:
            composite.append(err)
    if len(composite) > 0:
        raise composite


def validate_asset(asset: AssetModel, chain: str, address: str) -> None:
    """Validate an asset info model against the address of its folder.

    Missing required keys are reported on their own; once they are all
    present, every remaining check runs and failures are raised together.
    """
    validate_asset_required_keys(asset)

    _collect(
        (
            lambda: validate_asset_id(asset.id, address),
            lambda: validate_decimals(asset.decimals),
            lambda: validate_asset_decimals_according_type(asset.type, asset.decimals),
            lambda: validate_status(asset.status),
            lambda: validate_description(asset.description),
            lambda: validate_description_website(asset.description, asset.website),
            lambda: validate_links(asset.links),
        )
    )


def validate_coin(coin: CoinModel, allowed_tags: Iterable[str]) -> None:
    """Validate a chain info model, accepting only the given tags."""
    validate_coin_required_keys(coin)
    tags = list(allowed_tags)

    _collect(
        (
            lambda: validate_coin_type(coin.type),
            lambda: validate_decimals(coin.decimals),
            lambda: validate_status(coin.status),
            lambda: validate_tags(coin.tags, tags),
            lambda: validate_description(coin.description),
            lambda: validate_description_website(coin.description, coin.website),
            lambda: validate_links(coin.links),
        )
    )