# src/drills/core/wallet.py
"""
Wallet holding a Bitcoin balance.

Withdrawals larger than the balance are refused and leave it untouched.
"""


class Bitcoin(int):
    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class WalletError(Exception):
    pass


class InsufficientFunds(WalletError):
    def __init__(self, requested: Bitcoin, balance: Bitcoin):
        super().__init__("cannot withdraw, insufficient funds")
        self.requested = requested
        self.balance = balance


class Wallet:
    def __init__(self, opening: int = 0):
        self._balance = Bitcoin(opening)

    def deposit(self, amount: int) -> None:
        self._balance = Bitcoin(self._balance + amount)

    def balance(self) -> Bitcoin:
        return self._balance

    def withdraw(self, amount: int) -> None:
        if amount > self._balance:
            raise InsufficientFunds(Bitcoin(amount), self._balance)
        self._balance = Bitcoin(self._balance - amount)
