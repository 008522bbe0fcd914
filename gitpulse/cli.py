from __future__ import annotations

import argparse
import logging
import os
import sys

from gitpulse import __version__
from gitpulse.config import Config
from gitpulse.display import RENDERERS, render
from gitpulse.errors import ConfigError
from gitpulse.statusline import StatusLine

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _die(msg: str) -> None:
    print(msg, file=sys.stderr)
    sys.exit(1)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _directory(args: argparse.Namespace) -> str:
    return os.path.abspath(args.path) if args.path else os.getcwd()


def _load_config(args: argparse.Namespace) -> Config:
    try:
        return Config.from_env().with_overrides(
            update_interval=args.interval,
            warning_threshold=args.threshold,
            use_builtin_diff=args.builtin,
            change_command=args.change_command,
        )
    except ConfigError as exc:
        _die(f"gitpulse: {exc}")


def cmd_status(args: argparse.Namespace) -> None:
    status_line = StatusLine(_load_config(args))
    status = status_line.refresh(_directory(args), active=not args.inactive)
    line = render(status, args.format)
    if line:
        print(line)


def cmd_diff(args: argparse.Namespace) -> None:
    status_line = StatusLine(_load_config(args))
    print(status_line.change_count(_directory(args)))


def cmd_commits(args: argparse.Namespace) -> None:
    status_line = StatusLine(_load_config(args))
    print(status_line.commit_count(_directory(args)))


def cmd_watch(args: argparse.Namespace) -> None:
    from gitpulse.watcher import watch

    status_line = StatusLine(_load_config(args))
    try:
        watch(status_line, _directory(args), fmt=args.format, debounce=args.debounce)
    except RuntimeError as exc:
        _die(str(exc))


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--path", default=None, help="Working directory (default: cwd)")
    common.add_argument("--interval", type=float, default=None, help="Seconds between diff recomputes")
    common.add_argument("--threshold", type=int, default=None, help="Change count that triggers the warning style")
    common.add_argument("--change-command", default=None, help="External command printing a change count")
    mode = common.add_mutually_exclusive_group()
    mode.add_argument("--builtin", dest="builtin", action="store_true", default=None,
                      help="Count changes with git's word diff")
    mode.add_argument("--external", dest="builtin", action="store_false", default=None,
                      help="Count changes with the external change command")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gitpulse")
    parser.add_argument(
        "--version", action="version", version=f"gitpulse {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log command failures to stderr")
    sub = parser.add_subparsers(dest="cmd")
    common = _common_parser()
    formats = sorted(RENDERERS)

    status_cmd = sub.add_parser("status", parents=[common], help="Print the status fragment once")
    status_cmd.add_argument("--format", choices=formats, default="plain")
    status_cmd.add_argument("--inactive", action="store_true", help="Surface is not being rendered")
    status_cmd.set_defaults(func=cmd_status)

    diff_cmd = sub.add_parser("diff", parents=[common], help="Print the uncommitted change count")
    diff_cmd.set_defaults(func=cmd_diff)

    commits_cmd = sub.add_parser("commits", parents=[common], help="Print today's commit count")
    commits_cmd.set_defaults(func=cmd_commits)

    watch_cmd = sub.add_parser("watch", parents=[common], help="Print the status fragment whenever it changes")
    watch_cmd.add_argument("--format", choices=formats, default="plain")
    watch_cmd.add_argument("--debounce", type=float, default=1.0)
    watch_cmd.set_defaults(func=cmd_watch)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
