import pytest

from patternbook.facade import Account, Wallet, WalletError, WalletFacade, main

ACCOUNT = "abc"
CODE = 1234


@pytest.fixture
def facade():
    return WalletFacade(ACCOUNT, CODE)


def test_new_facade_starts_empty(facade):
    assert facade.wallet.balance == Wallet().balance
    assert facade.account.name == ACCOUNT
    assert facade.security_code.code == CODE


def test_add_money_credits_wallet(facade):
    facade.add_money_to_wallet(ACCOUNT, CODE, 10)
    assert facade.wallet.balance == 10


def test_deduct_money_debits_wallet(facade):
    facade.add_money_to_wallet(ACCOUNT, CODE, 10)
    facade.deduct_money_from_wallet(ACCOUNT, CODE, 4)
    assert facade.wallet.balance == 10 - 4


def test_insufficient_balance_is_refused(facade):
    facade.add_money_to_wallet(ACCOUNT, CODE, 3)
    with pytest.raises(WalletError, match="Balance is not sufficient"):
        facade.deduct_money_from_wallet(ACCOUNT, CODE, 5)
    assert facade.wallet.balance == 3


def test_wrong_account_is_refused(facade):
    with pytest.raises(WalletError, match="Account Name is incorrect"):
        facade.add_money_to_wallet("xyz", CODE, 10)
    assert facade.wallet.balance == Wallet().balance


def test_wrong_code_is_refused(facade):
    facade.add_money_to_wallet(ACCOUNT, CODE, 8)
    with pytest.raises(WalletError, match="Security Code is incorrect"):
        facade.deduct_money_from_wallet(ACCOUNT, CODE + 1, 2)
    assert facade.wallet.balance == 8


def test_add_money_writes_ledger_entry(facade, capsys):
    capsys.readouterr()
    facade.add_money_to_wallet(ACCOUNT, CODE, 10)
    out = capsys.readouterr().out
    assert "Make ledger entry for accountId abc with txnType credit for amount 10" in out
    assert "Sending wallet credit notification" in out


def test_account_check_direct():
    with pytest.raises(WalletError):
        Account("one").check_account("two")


def test_wallet_debit_exact_balance():
    wallet = Wallet(balance=7)
    wallet.debit_balance(7)
    assert wallet.balance == Wallet().balance


def test_main_runs_through(capsys):
    main()
    out = capsys.readouterr().out
    assert "Sending wallet debit notification" in out
    assert out.index("Starting add money to wallet") < out.index(
        "Starting debit money from wallet"
    )