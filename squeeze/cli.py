"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

from squeeze.asset import ResolveError
from squeeze.files import load_config
from squeeze.logs import fatal, setup_logging
from squeeze.resolver import PathResolver


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args, get_resolver(args))


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="squeeze", description="tool for resolving asset paths"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_resolve = commands.add_parser("resolve", help="resolve include paths")
    parser_resolve.add_argument(
        "-f", "--files", action="store_true", help="show filenames on disk"
    )
    parser_resolve.add_argument(
        "-a",
        "--absolute",
        action="store_true",
        help="show paths relative to the document root",
    )
    parser_resolve.add_argument(
        "-c",
        "--cycle-hosts",
        action="store_true",
        help="qualify absolute paths with hosts in turn",
    )
    parser_resolve.add_argument(
        "-e", "--exists", action="store_true", help="only show files that exist"
    )
    parser_resolve.add_argument("paths", nargs="+", metavar="path")

    parser_rebase = commands.add_parser(
        "rebase", help="express include paths relative to a new base"
    )
    parser_rebase.add_argument("new_base", help="new base directory")
    parser_rebase.add_argument("paths", nargs="+", metavar="path")

    parser_hosts = commands.add_parser("hosts", help="cycle through asset hosts")
    parser_hosts.add_argument(
        "-n", "--count", type=int, help="number of hosts (default: one cycle)"
    )

    for subparser in [parser_resolve, parser_rebase, parser_hosts]:
        subparser.add_argument("-b", "--base", help="base directory for relative paths")
        subparser.add_argument(
            "-r", "--document-root", help="document root for absolute paths"
        )
        subparser.add_argument(
            "-H",
            "--host",
            action="append",
            dest="hosts",
            help="host served from the document root (can use multiple times)",
        )
        subparser.add_argument(
            "--config", type=Path, help="configuration file (default: squeeze.yml)"
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase loggging (can use multiple times)",
        )

    return parser, commands.choices


def get_resolver(args: Namespace) -> PathResolver:
    """Create a resolver from the configuration file and command-line options.

    Options given on the command line take precedence over the configuration.
    """
    if args.config and not args.config.is_file():
        fatal("configuration %s not found", args.config)
    cfg = load_config(args.config)
    resolver = PathResolver.from_config(
        cfg, base=args.base, document_root=args.document_root, hosts=args.hosts
    )
    logging.debug("using %r", resolver)
    return resolver


def command_resolve(args: Namespace, resolver: PathResolver):
    for path in args.paths:
        asset = resolver.resolve(path)
        try:
            if args.exists and not asset.exists():
                logging.info("%s: %s does not exist", path, asset.filename)
                continue
            if args.files:
                result = asset.filename
            elif args.absolute:
                host = resolver.cycle_hosts() if args.cycle_hosts else None
                result = asset.absolute_path(host)
            else:
                result = asset.path
        except ResolveError as ex:
            logging.error("%s: %s", path, ex)
            continue
        logging.debug("resolved %s to %s", path, result)
        print(result)


def command_rebase(args: Namespace, resolver: PathResolver):
    for path in args.paths:
        try:
            rebased = resolver.resolve(path).rebase(args.new_base)
        except ResolveError as ex:
            logging.error("%s: %s", path, ex)
            continue
        print(rebased.path)


def command_hosts(args: Namespace, resolver: PathResolver):
    if not resolver.hosts:
        logging.warning("no hosts configured")
        return
    count = args.count if args.count is not None else len(resolver.hosts)
    for _ in range(count):
        print(resolver.cycle_hosts())
