import pytest

from assetcheck.fields import CompositeError, InvalidFieldError, MissingFieldError
from assetcheck.info import validate_asset, validate_coin
from assetcheck.models import AssetModel, CoinModel, Link

ADDRESS = "0xAbC"


def make_asset(**overrides):
    values = dict(
        name="Token",
        symbol="TKN",
        type="ERC20",
        decimals=18,
        description="A token.",
        website="https://example.com",
        explorer="https://etherscan.io/token/0xAbC",
        status="active",
        id=ADDRESS,
    )
    values.update(overrides)
    return AssetModel(**values)


def make_coin(**overrides):
    values = dict(
        name="Chain",
        symbol="CHN",
        type="coin",
        decimals=8,
        description="A chain.",
        website="https://example.com",
        explorer="https://example.com/explorer",
        status="active",
        tags=["defi"],
    )
    values.update(overrides)
    return CoinModel(**values)


def test_valid_asset_passes():
    assert validate_asset(make_asset(), "ethereum", ADDRESS) is None


def test_missing_keys_reported_before_other_checks():
    asset = make_asset(name=None, status="bogus")
    with pytest.raises(MissingFieldError) as exc:
        validate_asset(asset, "ethereum", ADDRESS)
    assert exc.value.detail == "name"


def test_asset_failures_are_collected():
    asset = make_asset(id="0xabc", decimals=31, status="bogus")
    with pytest.raises(CompositeError) as exc:
        validate_asset(asset, "ethereum", ADDRESS)
    assert len(exc.value) == 3
    assert all(isinstance(e, InvalidFieldError) for e in exc.value)
    assert "invalid case for id field" in str(exc.value)


def test_bep2_decimals_checked():
    asset = make_asset(type="BEP2", decimals=18)
    with pytest.raises(CompositeError) as exc:
        validate_asset(asset, "binance", ADDRESS)
    assert len(exc.value) == 1
    assert "BEP2 tokens have 8 decimals" in str(exc.value)


def test_empty_website_needs_dash_description():
    with pytest.raises(CompositeError) as exc:
        validate_asset(make_asset(website=""), "ethereum", ADDRESS)
    assert isinstance(exc.value.errors[0], MissingFieldError)
    assert validate_asset(make_asset(website="", description="-"), "ethereum", ADDRESS) is None


def test_asset_links_checked():
    links = [
        Link(name="github", url="https://github.com/example"),
        Link(name="unknown", url="https://example.com"),
    ]
    with pytest.raises(CompositeError) as exc:
        validate_asset(make_asset(links=links), "ethereum", ADDRESS)
    assert len(exc.value) == 1
    assert "links.name" in str(exc.value)


def test_valid_coin_passes():
    assert validate_coin(make_coin(), ["defi", "nft"]) is None


def test_coin_missing_website():
    with pytest.raises(MissingFieldError) as exc:
        validate_coin(make_coin(website=""), ["defi"])
    assert exc.value.detail == "website"


def test_coin_failures_are_collected():
    coin = make_coin(type="token", tags=["gaming"])
    with pytest.raises(CompositeError) as exc:
        validate_coin(coin, ["defi"])
    assert len(exc.value) == 2
    assert "tag 'gaming' not allowed" in str(exc.value)


def test_coin_accepts_generator_of_tags():
    assert validate_coin(make_coin(), (t for t in ["defi"])) is None