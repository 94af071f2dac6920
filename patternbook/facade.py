"""Facade: one wallet interface over account, code, wallet, notification and ledger."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


class WalletError(Exception):
    """Raised when a wallet operation is refused."""


@dataclass
class Account:
    """An account identified by its name."""

    name: str

    def check_account(self, account_name: str) -> None:
        """Raise WalletError unless ``account_name`` matches this account."""
        if self.name != account_name:
            raise WalletError("Account Name is incorrect")
        print("Account Verified")


@dataclass
class SecurityCode:
    """The numeric code guarding an account."""

    code: int

    def check_code(self, incoming_code: int) -> None:
        """Raise WalletError unless ``incoming_code`` matches."""
        if self.code != incoming_code:
            raise WalletError("Security Code is incorrect")
        print("SecurityCode Verified")


@dataclass
class Wallet:
    """Holds a balance."""

    balance: int = 0

    def credit_balance(self, amount: int) -> None:
        self.balance += amount
        print("Wallet balance added successfully")

    def debit_balance(self, amount: int) -> None:
        """Take ``amount`` out; raise WalletError if the balance is too low."""
        if self.balance < amount:
            raise WalletError("Balance is not sufficient")
        print("Wallet balance is Sufficient")
        self.balance -= amount


@dataclass
class Notification:
    """Sends notices about wallet changes and keeps a record of them."""

    sent: list[str] = field(default_factory=list)

    def send_wallet_credit_notification(self) -> None:
        self.sent.append("credit")
        print("Sending wallet credit notification")

    def send_wallet_debit_notification(self) -> None:
        self.sent.append("debit")
        print("Sending wallet debit notification")


class Ledger:
    """Records transactions."""

    def make_entry(self, account_id: str, txn_type: str, amount: int) -> None:
        print(
            f"Make ledger entry for accountId {account_id} "
            f"with txnType {txn_type} for amount {amount}"
        )


class WalletFacade:
    """A simple front for crediting and debiting a wallet."""

    def __init__(self, account_id: str, code: int) -> None:
        print("Starting create account")
        self.account = Account(account_id)
        self.security_code = SecurityCode(code)
        self.wallet = Wallet()
        self.notification = Notification()
        self.ledger = Ledger()
        print("Account created")

    def _verify(self, account_id: str, security_code: int) -> None:
        self.account.check_account(account_id)
        self.security_code.check_code(security_code)

    def add_money_to_wallet(self, account_id: str, security_code: int, amount: int) -> None:
        """Credit ``amount`` after verifying the account and code."""
        print("Starting add money to wallet")
        self._verify(account_id, security_code)
        self.wallet.credit_balance(amount)
        self.notification.send_wallet_credit_notification()
        self.ledger.make_entry(account_id, "credit", amount)

    def deduct_money_from_wallet(
        self, account_id: str, security_code: int, amount: int
    ) -> None:
        """Debit ``amount`` after verifying the account and code."""
        print("Starting debit money from wallet")
        self._verify(account_id, security_code)
        self.wallet.debit_balance(amount)
        self.notification.send_wallet_debit_notification()
        self.ledger.make_entry(account_id, "credit", amount)


def main(argv: list[str] | None = None) -> None:
    print()
    wallet_facade = WalletFacade("abc", 1234)
    print()
    try:
        wallet_facade.add_money_to_wallet("abc", 1234, 10)
        print()
        wallet_facade.deduct_money_from_wallet("abc", 1234, 5)
    except WalletError as err:
        print(f"Error: {err}", file=sys.stderr)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()