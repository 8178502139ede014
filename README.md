# flowkit

A library for working with Flow project configuration. It covers accounts,
networks, contracts, emulators and deployments. It converts most sections of a
`flow.json` file to and from their JSON layout, and it loads and merges
configuration files through a parser that you supply.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `flowkit.config.account`
  - `Address`: eight bytes, built with `Address.from_hex` or `hex_to_address`.
    Short values are left-padded with zeros.
  - `KeyType`, `SignatureAlgorithm` and `HashAlgorithm`.
  - `AccountKey` with `is_default()`, and `new_default_account_key()`.
  - `Account`.
  - `Accounts`, with `by_name`, `add_or_update` and `remove`.
- `flowkit.config.network`
  - `Network` and `Networks`, with `by_name`, `add_or_update` and `remove`.
  - The predefined emulator, testnet, sandboxnet and mainnet networks.
- `flowkit.config.contract`
  - `Contract`, with `is_aliased()`.
  - `Contracts`, with `by_name`, `add_or_update` and `remove`.
  - `Alias` and `Aliases`, with `by_network` and `add`. There is at most one
    alias per network.
- `flowkit.config.emulator`
  - `Emulator`.
  - `Emulators`, with `default()` and `add_or_update`.
- `flowkit.config.deployment`
  - `CadenceValue`: a typed contract argument.
  - `ContractDeployment` and `Deployment`, with `add_contract` and
    `remove_contract`.
  - `Deployments`, with `by_network`, `by_account_and_network`,
    `add_or_update` and `remove`.
- `flowkit.config.config`
  - The `Config` aggregate. Its `validate()` checks that every reference
    points to something configured: each alias network, each emulator service
    account, and the network, contracts and account of each deployment.
  - `default()`, which holds the default emulator and networks.
  - The default file locations: `global_path()`, `default_paths()` and
    `is_default_path()`.
  - `OutdatedFormatError`, an exception that parsers can raise.
- `flowkit.config.processor`
  - `processor_run()` keeps only the known top-level sections of a raw JSON
    document and re-encodes them.
- `flowkit.config.loader`
  - `Loader` reads configuration through a `ReaderWriter` such as
    `FileSystem`. It runs `processor_run()` on each file and chooses a parser
    by file extension. Later files override earlier ones, and the result is
    validated.
  - For the default paths, `load` prefers the local `flow.json` and falls back
    to the global file.
  - `load` raises `ConfigDoesNotExistError` when nothing is found. `save`
    writes a configuration with the matching parser.
  - `Parser` and `ReaderWriter` are the protocols a parser and a storage
    backend must follow.
  - `Parsers` and `exists()`.
- `flowkit.config.jsonformat`
  - `contract`: `contracts_from_json` and `contracts_to_json`.
  - `deploy`: `deployments_from_json`, `deployments_to_json` and
    `decode_cadence_argument`, which decodes JSON-Cadence values.
  - `emulator`: `emulators_from_json` and `emulators_to_json`. The default
    emulator is left out on output.
  - `network`: `networks_from_json`, `networks_to_json` and
    `validate_ecdsa_p256_public_key`.
- `flowkit.events`
  - `Event`, `Events` and `new_event()`.
  - `events_from_transaction()` builds events from
    `(type, field names, field values)` triples.
  - `Events.get_created_addresses()` picks out the addresses from
    `flow.AccountCreated` events.

Lookups that fail raise `LookupError`. Validation and conversion failures
raise `ValueError`.

## Examples

Working with the default configuration:

```python
from flowkit.config.config import default
from flowkit.config.network import Network

conf = default()
conf.networks.add_or_update(Network(name="previewnet", host="127.0.0.1:3570"))
print(conf.networks.by_name("previewnet").host)
```

Loading files with a parser of your own. This one handles only networks:

```python
import json

from flowkit.config.config import Config
from flowkit.config.jsonformat.network import networks_from_json, networks_to_json
from flowkit.config.loader import FileSystem, Loader


class NetworksParser:
    def serialize(self, conf):
        return json.dumps({"networks": networks_to_json(conf.networks)}).encode()

    def deserialize(self, raw):
        return Config(networks=networks_from_json(json.loads(raw).get("networks", {})))

    def supports_format(self, extension):
        return extension == ".json"


loader = Loader(FileSystem())
loader.add_config_parser(NetworksParser())
conf = loader.load(["flow.json"])
```

## What it does not do

- There is no parser for a whole `flow.json` file. You must register a parser
  with the `Loader` before you call `load` or `save`.
- There is no JSON conversion for the `accounts` section. Accounts, keys and
  environment-variable substitution in keys must be handled by the caller.
- There is no command-line tool, and nothing talks to a Flow network or
  emulator.