"""CLI for running a request through the admission pipelines.

Usage:
    # Granted: decorated processing, then login -> permission
    accessguard --user admin

    # Rejected at the permission check
    accessguard --user bob --denied

    # Only the IP layer, with a known address, status lines sent to logging
    accessguard --user admin --decorator ip --address 10.0.0.7 --quiet-console
"""

import logging
import sys
from functools import partial

import click

from accessguard.application.coordinator import AccessCoordinator
from accessguard.checks import IdentityCheck, PermissionCheck, build_chain
from accessguard.domain.interfaces import StatusSinkInterface
from accessguard.domain.models import Request
from accessguard.infrastructure.sinks import ConsoleStatusSink, LoggingStatusSink
from accessguard.processing import (
    BasicOperation,
    DecoratorFactory,
    IPLoggingDecorator,
    TimeLoggingDecorator,
    wrap,
)

logger = logging.getLogger("accessguard")

_installed_handlers: list[logging.Handler] = []


def _configure_logging(debug: bool, log_file: str | None = None) -> None:
    """Set up logging for a CLI run.

    When *log_file* is set, detailed logs go to the file **and** a
    concise stream is kept on stderr. Handlers installed by an earlier
    call are removed first, so repeated invocations in one process do not
    stack handlers.
    """
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    fmt_detailed = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    fmt_concise = logging.Formatter("%(levelname)s - %(message)s")

    if log_file:
        # File gets everything.
        fh = logging.FileHandler(log_file, mode="a")
        fh.setLevel(level)
        fh.setFormatter(fmt_detailed)
        _installed_handlers.append(fh)
        # Terminal gets INFO+ with a shorter format.
        sh = logging.StreamHandler()
        sh.setLevel(logging.INFO)
        sh.setFormatter(fmt_concise)
        _installed_handlers.append(sh)
    else:
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(fmt_detailed if debug else fmt_concise)
        _installed_handlers.append(sh)

    for handler in _installed_handlers:
        root.addHandler(handler)


def _decorator_factories(
    names: tuple[str, ...], sink: StatusSinkInterface, address: str | None
) -> list[DecoratorFactory]:
    factories: dict[str, DecoratorFactory] = {
        "time": partial(TimeLoggingDecorator, sink=sink),
        "ip": partial(IPLoggingDecorator, sink=sink, address=address),
    }
    return [factories[name] for name in names]


@click.command()
@click.option("--user", "identity", default="admin", show_default=True, help="Request identity (empty string for none)")
@click.option("--permitted/--denied", default=True, show_default=True, help="Permission flag carried by the request")
@click.option(
    "--decorator",
    "decorators",
    multiple=True,
    type=click.Choice(["time", "ip"]),
    default=("time", "ip"),
    show_default=True,
    help="Processing decorator, outermost first (repeatable)",
)
@click.option("--no-decorators", is_flag=True, help="Process the request without any decorator")
@click.option("--address", default=None, help="Client address reported by the ip decorator")
@click.option("--quiet-console", is_flag=True, help="Send status lines to logging instead of the console")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-file",
    default=None,
    type=click.Path(),
    help="Write logs to file as well as stderr",
)
def cli(
    identity: str,
    permitted: bool,
    decorators: tuple[str, ...],
    no_decorators: bool,
    address: str | None,
    quiet_console: bool,
    debug: bool,
    log_file: str | None,
) -> None:
    """Process a request, then run it through login and permission checks.

    Exits 0 when access is granted and 1 when it is rejected.
    """
    _configure_logging(debug, log_file=log_file)

    sink: StatusSinkInterface = LoggingStatusSink() if quiet_console else ConsoleStatusSink()
    request = Request(identity=identity, permitted=permitted)

    factories = [] if no_decorators else _decorator_factories(decorators, sink, address)
    operation = wrap(BasicOperation(request.identity, sink=sink), *factories)
    operation.process()

    chain = build_chain(IdentityCheck(sink=sink), PermissionCheck(sink=sink))
    result = AccessCoordinator.get_instance().handle_request(request, chain)

    if result.rejected:
        logger.info("Access rejected for %r: %s", request.identity, result.feedback)
        sys.exit(1)
    logger.debug("Access granted for %r", request.identity)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
