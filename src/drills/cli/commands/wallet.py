"""
Wallet session commands.
"""

from drills.cli.session import console, expect_args, parse_int, report_ok, run_session
from drills.core.wallet import Bitcoin, Wallet, WalletError


def add_subparser(subparsers):
    parser = subparsers.add_parser("wallet", help="Interactive Bitcoin wallet")
    parser.add_argument("--opening", type=int, default=0, help="Opening balance")
    parser.set_defaults(func=wallet_session)


def make_actions(wallet: Wallet) -> dict:
    def deposit(args):
        expect_args(args, 1, "deposit AMOUNT")
        amount = Bitcoin(parse_int(args[0]))
        wallet.deposit(amount)
        report_ok(f"Deposited {amount}")

    def withdraw(args):
        expect_args(args, 1, "withdraw AMOUNT")
        amount = Bitcoin(parse_int(args[0]))
        wallet.withdraw(amount)
        report_ok(f"Withdrew {amount}")

    def balance(args):
        console.print(f"Balance: {wallet.balance()}")

    return {
        "deposit": deposit,
        "withdraw": withdraw,
        "balance": balance,
    }


def wallet_session(args, stream=None):
    wallet = Wallet(args.opening)
    run_session(make_actions(wallet), errors=(WalletError,), stream=stream)
