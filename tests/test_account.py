import pytest

from flowkit.config.account import (
    EMPTY_ADDRESS,
    Account,
    AccountKey,
    Accounts,
    Address,
    HashAlgorithm,
    KeyType,
    SignatureAlgorithm,
    hex_to_address,
    new_default_account_key,
)


@pytest.fixture
def two_accounts():
    acc1 = Account(name="test1", address=hex_to_address("0x1"))
    acc2 = Account(name="test2", address=hex_to_address("0x2"))
    return acc1, acc2


def test_by_name_present(two_accounts):
    acc1, acc2 = two_accounts
    accounts = Accounts([acc1, acc2])
    assert accounts.by_name("test1") == acc1


def test_by_name_missing(two_accounts):
    accounts = Accounts(two_accounts)
    with pytest.raises(LookupError, match="account with name test3 is not present in configuration"):
        accounts.by_name("test3")


def test_add_new_account(two_accounts):
    accounts = Accounts(two_accounts)
    acc3 = Account(name="test3", address=hex_to_address("0x3"))
    accounts.add_or_update("test3", acc3)
    assert len(accounts) == 3
    assert accounts.by_name("test3") == acc3


def test_update_existing_account(two_accounts):
    accounts = Accounts(two_accounts)
    updated = Account(name="test2", address=hex_to_address("0x4"))
    accounts.add_or_update("test2", updated)
    assert len(accounts) == 2
    assert accounts.by_name("test2") == updated


def test_remove():
    accounts = Accounts(
        [
            Account(name="account1", address=hex_to_address("01")),
            Account(name="account2", address=hex_to_address("02")),
            Account(name="account3", address=hex_to_address("03")),
        ]
    )
    accounts.remove("account2")
    assert len(accounts) == 2
    with pytest.raises(LookupError):
        accounts.by_name("account2")

    accounts.remove("account4")
    assert len(accounts) == 2


def test_address_pads_short_hex():
    assert hex_to_address("cdfef0f4f0786e9").hex() == "0cdfef0f4f0786e9"


def test_address_strips_prefix():
    assert str(hex_to_address("0x123123123")) == "0000000123123123"


def test_address_keeps_last_eight_bytes():
    assert Address.from_hex("aabbf8d6e0586b0a20c7").hex() == "f8d6e0586b0a20c7"


def test_address_invalid_hex_is_empty():
    assert hex_to_address("zz") == EMPTY_ADDRESS


def test_address_wrong_length_rejected():
    with pytest.raises(ValueError):
        Address(b"\x01\x02")


def test_default_account_key():
    key = new_default_account_key("placeholder")
    assert key.is_default()
    assert key.type == KeyType.HEX
    assert key.sig_algo == SignatureAlgorithm.ECDSA_P256
    assert key.hash_algo == HashAlgorithm.SHA3_256
    assert key.private_key == "placeholder"


def test_non_default_account_key():
    key = AccountKey(
        type=KeyType.HEX,
        index=1,
        sig_algo=SignatureAlgorithm.ECDSA_P256,
        hash_algo=HashAlgorithm.SHA3_256,
    )
    assert not key.is_default()
    assert not AccountKey().is_default()