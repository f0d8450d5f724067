"""Command-line entrypoint for generating and cleaning scratch projects."""

import argparse
import shutil
import sys

from . import __version__, log, manifests, paths
from .errors import ScaffoldFailure
from .roots import TestContext, project

CLI_CONTEXT_LABEL = "cli"


def die(message: str, code: int = 1) -> None:
    log.error(f"error: {message}")
    sys.exit(code)


def new_project(args: argparse.Namespace) -> None:
    builder = project(args.name, TestContext(label=CLI_CONTEXT_LABEL))
    if args.fuzz or args.target:
        builder.with_fuzz()
    for target in args.target:
        builder.fuzz_target(target, manifests.default_fuzz_target(args.name))
    built = builder.build()
    log.success(f"generated {built.name} in {built.root}")
    print(built.root)
    print(built.fuzz_command().display())


def show_scratch(args: argparse.Namespace) -> None:
    print(paths.scratch_dir())


def clean_scratch(args: argparse.Namespace) -> None:
    scratch = paths.scratch_dir()
    if args.all:
        shutil.rmtree(scratch)
        log.success(f"removed {scratch}")
        return
    removed = 0
    for entry in sorted(scratch.iterdir()):
        if entry.is_dir() and paths.is_root_dir_name(entry.name):
            shutil.rmtree(entry)
            removed += 1
    log.success(f"removed {removed} project root(s) from {scratch}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="fuzzscaffold")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--log-level",
        choices=log.LEVEL_NAMES,
        help="minimum level of diagnostic output",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable colored output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="generate a project")
    new_parser.add_argument("name", help="package name of the project")
    new_parser.add_argument(
        "--fuzz", action="store_true", help="add a fuzz sub-project"
    )
    new_parser.add_argument(
        "--target",
        action="append",
        default=[],
        metavar="NAME",
        help="add a default fuzz target (implies --fuzz)",
    )
    new_parser.set_defaults(func=new_project)

    scratch_parser = subparsers.add_parser(
        "scratch", help="print the scratch directory"
    )
    scratch_parser.set_defaults(func=show_scratch)

    clean_parser = subparsers.add_parser("clean", help="remove generated projects")
    clean_parser.add_argument(
        "--all",
        action="store_true",
        help="also remove the shared cargo home and target directories",
    )
    clean_parser.set_defaults(func=clean_scratch)

    args = parser.parse_args(argv)
    if args.log_level:
        log.set_level(args.log_level)
    if args.no_color:
        log.set_no_color(True)
    try:
        args.func(args)
    except ScaffoldFailure as exc:
        hint = f" ({exc.recovery_hint})" if exc.recovery_hint else ""
        die(f"{exc}{hint}")
    except OSError as exc:
        die(str(exc))


if __name__ == "__main__":
    main()
