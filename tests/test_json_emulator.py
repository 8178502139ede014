import json

import pytest

from flowkit.config.emulator import DEFAULT_EMULATOR, Emulator, Emulators
from flowkit.config.jsonformat.emulator import emulators_from_json, emulators_to_json


def test_config_emulator_simple():
    data = json.loads(
        """{
         "default": {
                "port": 9000,
                "serviceAccount": "emulator-account"
         }
     }"""
    )
    emulators = emulators_from_json(data)
    assert emulators[0].name == "default"
    assert emulators[0].port == 9000


def test_config_multiple_emulators():
    data = json.loads(
        """{
         "default": {
                "port": 9000,
                "serviceAccount": "emulator-account"
         },
         "custom-emulator": {
                "port": 3000,
                "serviceAccount": "custom-emulator-account"
         }
     }"""
    )
    emulators = emulators_from_json(data)
    assert len(emulators) == 2

    ordered = sorted(emulators, key=lambda e: e.port, reverse=True)
    assert ordered[0].name == "default"
    assert ordered[0].port == 9000
    assert ordered[0].service_account == "emulator-account"
    assert ordered[1].name == "custom-emulator"
    assert ordered[1].port == 3000
    assert ordered[1].service_account == "custom-emulator-account"


@pytest.mark.parametrize("port", [-1, 65536])
def test_invalid_port(port):
    with pytest.raises(ValueError, match="invalid port value"):
        emulators_from_json({"default": {"port": port, "serviceAccount": "emulator-account"}})


@pytest.mark.parametrize("entry", ["default", {"port": "3569"}, {"serviceAccount": 5}])
def test_invalid_entry(entry):
    with pytest.raises(ValueError):
        emulators_from_json({"default": entry})


def test_to_json_skips_default_emulator():
    assert emulators_to_json(Emulators([DEFAULT_EMULATOR])) == {}


def test_to_json_keeps_changed_default():
    emulators = Emulators([Emulator(name="default", port=6000, service_account="emulator-account")])
    assert emulators_to_json(emulators) == {
        "default": {"port": 6000, "serviceAccount": "emulator-account"}
    }


def test_round_trip():
    data = {"custom": {"port": 3000, "serviceAccount": "custom-account"}}
    assert emulators_to_json(emulators_from_json(data)) == data