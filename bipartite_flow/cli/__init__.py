# ruff: noqa: T201
import argparse
import logging
import pathlib
import sys

import bipartite_flow._config as config
import bipartite_flow._output as output
import bipartite_flow._parser as parser_
import bipartite_flow._util as util
from bipartite_flow._errors import BipartiteFlowError
from bipartite_flow._solver import solve

try:
    from ..__about__ import __version__
except ModuleNotFoundError:
    __version__ = "dev"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find a maximum matching in a bipartite graph"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="command",
        help="for more info use: %(prog)s <command> -h",
    )

    def add_subcommand(name, *args, **kwargs):
        subparser = subparsers.add_parser(name, *args, **kwargs)
        subparser.set_defaults(func=globals()[f"_{name}_command"])
        return subparser

    def add_common_args(subparser):
        subparser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=None,
            help="Enable debug logs",
        )
        subparser.add_argument(
            "-c",
            "--config",
            type=pathlib.Path,
            help="path to a config file, overrides the default location",
        )
        subparser.add_argument(
            "input_file",
            type=pathlib.Path,
            help="path to a graph description (text or .toml)",
        )

    subparser = add_subcommand("solve", help="print a maximum matching")
    add_common_args(subparser)
    subparser.add_argument(
        "-f", "--format", choices=output.FORMATS, help="output format"
    )
    subparser.add_argument(
        "-n",
        "--no-header",
        dest="header",
        action="store_false",
        default=None,
        help="Hide table header",
    )

    subparser = add_subcommand("check", help="validate a graph description")
    add_common_args(subparser)

    args = parser.parse_args(argv)

    # Don't use escape sequences, if stdout is not a tty
    if not sys.stdout.isatty():
        for attr in dir(Format):
            if not attr.startswith("_"):
                setattr(Format, attr, "")

    try:
        settings = config.load_config(args.config)
        verbose = settings.verbose if args.verbose is None else args.verbose
        level = logging.DEBUG if verbose else logging.WARNING
        util.configure_logging(level)

        with util.log_input(args.input_file.name):
            args.func(args, settings)
    except BipartiteFlowError as e:
        print(f"{Format.RED}{Format.BOLD}Error:{Format.RESET} {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


def _solve_command(args, settings):
    problem = parser_.load_problem(args.input_file)
    result = solve(problem)

    fmt = args.format or settings.format
    header = settings.header if args.header is None else args.header
    print(output.format_result(result, fmt, header))


def _check_command(args, settings):
    problem = parser_.load_problem(args.input_file)
    half = problem.node_count // 2
    print(
        f"{Format.GREEN}{args.input_file} is valid:{Format.RESET} "
        f"{half} left nodes, {half} right nodes, {len(problem.edges)} edges"
    )


class Format:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
