"""
OCS01 interactive contract client

Loads a wallet and a contract interface, then loops over a numbered menu of
the contract's methods:

  view methods  - evaluated by the node, result printed
  call methods  - signed transaction submitted, optionally waits for
                  confirmation
"""

import logging
from typing import List

import click

from . import __version__
from .builder import TransactionBuilder
from .client import LedgerClient
from .config import get_http_timeout, load_interface, load_wallet
from .crypto import Signer
from .dispatcher import MethodDispatcher
from .exceptions import ConfigError, OCS01Error, SigningError, UnsupportedMethodKind
from .models import MethodDescriptor, PollState
from .poller import ConfirmationPoller
from .utils import Utils

logger = logging.getLogger(__name__)


def _read_input(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="").strip()


def _collect_params(method: MethodDescriptor) -> List[str]:
    return [_read_input(param.prompt) for param in method.params]


def _confirm_wait(tx_hash: str) -> bool:
    click.echo(f"\ntx: {tx_hash}")
    if _read_input("wait for confirmation? y/n: ").lower() != "y":
        return False
    click.echo("waiting", nl=False)
    return True


def _print_header(dispatcher: MethodDispatcher) -> None:
    click.echo("\n--- ocs01 test client ---")
    click.echo(f"contract: {dispatcher.interface.contract}")

    # balance is re-read every round, other clients may use the same account
    try:
        account = dispatcher.client.get_balance(dispatcher.caller)
    except OCS01Error as exc:
        click.echo(f"error: {exc.message}")
    else:
        click.echo(
            f"your balance: {Utils.format_balance(account.balance)} oct (nonce: {account.nonce})"
        )

    click.echo("\nselect method:")
    for i, method in enumerate(dispatcher.interface.methods, start=1):
        click.echo(f"{i}. {method.label}")
    click.echo("0. exit")


def _run_method(dispatcher: MethodDispatcher, method: MethodDescriptor) -> None:
    click.echo(f"\n--- {method.name} ---")
    params = _collect_params(method)

    try:
        result = dispatcher.dispatch(method, params, confirm=_confirm_wait)
    except UnsupportedMethodKind:
        click.echo("unknown method type")
        return
    except OCS01Error as exc:
        click.echo(f"error: {exc.message}")
        return

    if result.output is not None:
        click.echo(f"\nresult: {result.output}")
    elif result.outcome is PollState.CONFIRMED:
        click.echo("\nconfirmed")
    elif result.outcome is PollState.TIMED_OUT:
        click.echo("\ntimeout")
    elif result.outcome is PollState.FAILED:
        click.echo(f"\nerror: {result.error}")


def run_console(dispatcher: MethodDispatcher) -> None:
    """Menu loop; returns when the operator picks 0"""
    methods = dispatcher.interface.methods
    while True:
        _print_header(dispatcher)

        choice = _read_input("\nchoice: ")
        if choice == "0":
            break

        try:
            idx = int(choice)
        except ValueError:
            idx = 0
        if 0 < idx <= len(methods):
            _run_method(dispatcher, methods[idx - 1])

        _read_input("\npress enter to continue...")

    click.echo("\nbye")


@click.command()
@click.option(
    "--wallet", "wallet_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Wallet file (default: $OCS01_WALLET or wallet.json).",
)
@click.option(
    "--interface", "interface_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Contract interface file (default: $OCS01_INTERFACE or exec_interface.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__, prog_name="ocs01")
def cli(wallet_path, interface_path, verbose):
    """Interactive client for OCS01 contracts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        wallet = load_wallet(wallet_path)
        interface = load_interface(interface_path)
        signer = Signer(wallet.private_key)
        timeout = get_http_timeout()
    except (ConfigError, SigningError) as exc:
        raise click.ClickException(exc.message) from exc

    if not interface.methods:
        logger.warning("interface for %s declares no methods", interface.contract)

    with LedgerClient(wallet.rpc_url, timeout=timeout) as client:
        poller = ConfirmationPoller(client, on_tick=lambda session: click.echo(".", nl=False))
        builder = TransactionBuilder(client, signer)
        dispatcher = MethodDispatcher(interface, wallet.address, client, builder, poller)
        run_console(dispatcher)


def main():
    cli()


if __name__ == "__main__":
    main()
