# assetcheck

Rules and a small job runner for checking token and chain metadata:
`info.json` models for assets and chains, their links, tags, status values
and descriptions.

## Installation

```
pip install assetcheck
```

To run the test suite, install the `test` extra:

```
pip install "assetcheck[test]"
pytest
```

## Configuration

`assetcheck.config.load_config(path)` reads a YAML file, resolving the path
to an absolute one, and `config_from_mapping(data)` builds the same result
from a plain mapping. Both return a `Config` dataclass with these sections:

- `app.log_level`
- `client_urls.binance.dex`, `client_urls.binance.explorer`,
  `client_urls.assets_manager_api`
- `urls.assets_app`, `urls.logo`
- `time_format`
- `validators_settings`: `root_folder` (`allowed_files`, `skip_files`,
  `skip_dirs`), `chain_folder.allowed_files`, `asset_folder.allowed_files`,
  `chain_info_folder.has_files`, `chain_validators_asset_folder.has_files`
  and `dapps_folder.ext`

Missing keys get empty defaults; a value of the wrong kind raises
`TypeError`.

`is_staking_chain(handle)` tells whether a chain handle is one of those in
`STAKING_CHAINS` (tezos, cosmos, iotex, tron, waves, kava, terra, binance).

```python
from assetcheck.config import load_config, is_staking_chain

config = load_config(".github/assets.config.yaml")
print(config.validators_settings.root_folder.allowed_files)
print(is_staking_chain("tezos"))  # True
```

## Models

`assetcheck.models` holds `CoinModel`, `AssetModel` and `Link`. They are read
from the dictionary of an `info.json` with `from_dict` and written back with
`to_dict`. Keys that are absent stay `None` (or an empty list for `tags` and
`links`) and are left out again by `to_dict`. A value of the wrong type raises
`ValueError`. `AssetModel.status_text()` gives the status, or `""` when none
is set.

The module also has `TokenInfo`, `TradingPair` and `TradingPairs` (read with
`from_dict` from a `{"data": {"pairs": [...]}}` document), `ForceListPair`,
and the step records `Validator`, `Fixer` and `Updater`, each a name with a
callable `run`.

```python
import json
from assetcheck.models import AssetModel

with open("info.json", encoding="utf-8") as fh:
    asset = AssetModel.from_dict(json.load(fh))
print(asset.status_text())
```

## Validating

`assetcheck.info.validate_asset(asset, chain, address)` and
`assetcheck.info.validate_coin(coin, allowed_tags)` check a whole model. They
first make sure every required key is present, raising `MissingFieldError`
that lists the missing ones. Then every field check runs, and all failures
are raised together as one `CompositeError`, whose `errors` list holds each
problem. All of these errors derive from `ValidationError`.

```python
from assetcheck.fields import CompositeError, ValidationError
from assetcheck.info import validate_asset

try:
    validate_asset(asset, "ethereum", "0x0000000000000000000000000000000000000001")
except CompositeError as err:
    for problem in err.errors:
        print(problem)
except ValidationError as err:
    print(err)
```

The single-field rules in `assetcheck.fields` can also be used on their own:

- `validate_asset_required_keys`, `validate_coin_required_keys`
- `validate_asset_id`: the id must equal the address, case included
- `validate_asset_decimals_according_type`: `BEP2` tokens need 8 decimals
- `validate_coin_type`: only `"coin"` is accepted
- `validate_decimals`: 0 to 30
- `validate_status`: `active`, `spam` or `abandoned`
- `validate_description`: at most 600 bytes of UTF-8, with no newline and no
  double space
- `validate_description_website`: a website is needed unless the
  description is `"-"`
- `validate_tags`: every tag must be in the allowed list
- `validate_links`: runs only when there are two or more links. Each link
  needs a name from `supported_link_names()` and an `https://` URL, with the
  prefix required for that name, and `medium` links must contain
  `medium.com`.
- `explorer_url_alternatives(chain, name)`: the other explorer URLs accepted
  for a token of that name

## Running jobs

`assetcheck.runner.JobRunner` holds a sequence of `items` and a `Report`.
`run_job(job)` calls `job` for each item and counts it. At the end it logs the
summary, for example `Total files: 12, errors: 2`. If any error was counted it
raises `JobFailed` carrying that summary; otherwise it returns the summary.

`check(item)` runs the validators that `validators_for(item)` returns, and
`fix(item)` runs the fixers that `fixers_for(item)` returns. Either does
nothing when no such function was given. Any exception raised by a step is
flattened with `unwrap_composite`, so that each error inside a
`CompositeError` counts on its own. Each error is logged through the
standard `logging` module with the item's description and the step's name.
`run_update_auto()` runs the `updaters` and logs any failure.

```python
from assetcheck.models import Validator
from assetcheck.runner import JobFailed, JobRunner

runner = JobRunner(
    items=["a/info.json", "b/info.json"],
    validators_for=lambda path: [Validator("my check", my_check)],
)
try:
    print(runner.run_job(runner.check))
except JobFailed as failed:
    print("failed:", failed)
```

## What this package does not do

`assetcheck` is a library only. It installs no command-line tool. It does not
walk a repository's directory tree or decide which checks belong to which
file. It ships no built-in validators or fixers for folders, logos, token
lists or validator lists, and it performs no automatic updates. It does not
fetch allowed tags from any remote service. The caller supplies the items,
the steps for each item, and the allowed tags.