from __future__ import annotations

"""Command line tool that validates location specifications."""

import argparse
import zipfile
from typing import Any, Callable, Dict, List, Optional, Sequence

from fallible import result
from fallible.logger import configure, log_debug, log_err, log_info, log_ok
from fallible.option import Option
from fallible.path_utilities import is_valid_file, is_valid_path, read_file_safely
from fallible.result import Result

Location = Dict[str, Any]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fallible-check",
        description="Validate folder:, zip: and ftp: location specifications.",
    )
    parser.add_argument("specs", nargs="*", help="location specifications")
    parser.add_argument("--file", help="read specifications from a file, one per line")
    parser.add_argument("--verbose", action="store_true", default=None)
    parser.add_argument("--no-color", dest="color", action="store_false", default=None)
    return parser


def _strip_prefix(spec: str, prefix: str) -> Option[str]:
    return Option.Some(spec).filter(lambda s: s.startswith(prefix)).map(
        lambda s: s[len(prefix) :]
    )


def _folder(spec: str, folder_path: str) -> Result[Location, Exception]:
    if not folder_path:
        return Result.Err(f"Missing folder path. [{spec}]")
    return is_valid_path(folder_path).map(lambda path: {"type": "folder", "path": path})


def _zip(spec: str, zip_path: str) -> Result[Location, Exception]:
    if not zip_path:
        return Result.Err(f"Missing archive path. [{spec}]")

    def check_archive(path: Any) -> Result[Location, Exception]:
        if not zipfile.is_zipfile(path):
            return Result.Err(f"Path is not a valid ZIP archive. [{zip_path}]")
        return Result.Ok({"type": "zip", "path": path})

    return is_valid_file(zip_path).chain(check_archive)


def _ftp(spec: str, ftp_spec: str) -> Result[Location, Exception]:
    try:
        creds, rest = ftp_spec.split("@", 1)
        username, password = creds.split(":", 1)
    except ValueError:
        return Result.Err(f"Invalid FTP specification. [{spec}]")

    if "/" in rest:
        host, remote_path = rest.split("/", 1)
        remote_path = "/" + remote_path
    else:
        host = rest
        remote_path = "/"

    if not username or not password or not host:
        return Result.Err(f"Invalid FTP specification. [{spec}]")

    return Result.Ok(
        {
            "type": "ftp",
            "username": username,
            "password": password,
            "host": host,
            "path": remote_path,
        }
    )


def _by_prefix(
    spec: str,
    prefix: str,
    parse: Callable[[str, str], Result[Location, Exception]],
    otherwise: Callable[[], Result[Location, Exception]],
) -> Result[Location, Exception]:
    return _strip_prefix(spec, prefix).match(
        some=lambda rest: parse(spec, rest),
        none=otherwise,
    )


def parse_location(spec: str) -> Result[Location, Exception]:
    """Parse a location specification into a structured dictionary.

    Supported formats:
        - folder:/path/to/folder
        - zip:/path/to/archive.zip
        - ftp:username:password@host/path
    """
    spec = spec.strip()
    if not spec:
        return Result.Err("Empty path specification.")

    return _by_prefix(
        spec,
        "folder:",
        _folder,
        lambda: _by_prefix(
            spec,
            "zip:",
            _zip,
            lambda: _by_prefix(
                spec,
                "ftp:",
                _ftp,
                lambda: Result.Err(
                    f"Unknown path type (expected folder:/zip:/ftp:). [{spec}]"
                ),
            ),
        ),
    )


def _spec_lines(lines: List[str]) -> List[str]:
    stripped = (ln.strip() for ln in lines)
    return [ln for ln in stripped if ln and not ln.startswith("#")]


def load_specs(paths_file: str) -> Result[List[str], Exception]:
    """Read location specifications from a file.

    Blank lines and lines starting with ``#`` are skipped.
    """
    return (
        is_valid_file(paths_file)
        .chain(read_file_safely)
        .map(lambda data: data.decode(errors="ignore").splitlines())
        .map(_spec_lines)
    )


def describe(location: Location) -> str:
    if location["type"] == "ftp":
        return f"ftp://{location['username']}@{location['host']}{location['path']}"
    return f"{location['type']}:{location['path']}"


def check_specs(specs: Sequence[str]) -> List[Result[Location, Exception]]:
    """Parse every spec, logging one line per spec."""
    parsed: List[Result[Location, Exception]] = []
    for spec in specs:
        outcome = parse_location(spec)
        outcome.match(
            ok=lambda location: log_ok(describe(location)),
            err=lambda error: log_err(str(error)),
        )
        parsed.append(outcome)
    return parsed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the location checker."""
    args = build_parser().parse_args(argv)
    configure(verbose=args.verbose, color=args.color)

    specs: List[str] = list(args.specs)
    if args.file:
        loaded = load_specs(args.file)
        if loaded.is_err():
            log_err(f"Could not read paths file: {loaded.unwrap()}")
            return 2
        specs.extend(loaded.unwrap_or([]))

    if not specs:
        log_info("No location specifications given.")
        return 0

    log_debug(f"Checking {len(specs)} specification(s)")
    collected = result.sequence(check_specs(specs))
    return collected.match(
        ok=lambda locations: _report(len(locations)),
        err=lambda _: 1,
    )


def _report(count: int) -> int:
    log_info(f"All {count} location(s) are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
