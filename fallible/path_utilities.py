from __future__ import annotations

"""Helpers for working with filesystem paths, returning Option and Result."""

import os
import time
from pathlib import Path
from typing import Union

from fallible.logger import log_debug
from fallible.option import Option
from fallible.result import Result


def is_valid_path(path: Union[str, Path]) -> Result[Path, Exception]:
    """Validate that the given path is an existing directory.

    Args:
        path: The path to validate.

    Returns:
        Ok(Path) if the path is a directory, otherwise Err.
    """
    try:
        path_obj = Path(path)
        if not path_obj.is_dir():
            return Result.Err(f"Path is not directory. [{path}]")
        return Result.Ok(path_obj)
    except (OSError, TypeError, ValueError):
        return Result.Err(f"Path is not valid. [{path}]")


def is_valid_file(path: Union[str, Path]) -> Result[Path, Exception]:
    """Validate that the given path is an existing file.

    Args:
        path: The path to validate.

    Returns:
        Ok(Path) if the path is a file, otherwise Err.
    """
    try:
        path_obj = Path(path)
        if not path_obj.is_file():
            return Result.Err(f"Path is not file. [{path}]")
        return Result.Ok(path_obj)
    except (OSError, TypeError, ValueError):
        return Result.Err(f"Path is not valid. [{path}]")


def find_file(root: Union[str, Path], name: str) -> Option[Path]:
    """Find the first file called ``name`` below ``root``.

    Directories are walked in sorted order so the match is stable.

    Args:
        root: Directory to search.
        name: File name to look for.

    Returns:
        Some(Path) of the first match, or Nothing.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        if name in filenames:
            return Option.Some(Path(dirpath) / name)
    return Option.Nothing()


def read_file_safely(
    path: Union[str, Path],
    retries: int = 10,
    delay: float = 0.05,
) -> Result[bytes, Exception]:
    """Read a file with retries on PermissionError.

    Args:
        path: Path to the file to read.
        retries: Number of attempts before giving up.
        delay: Delay (in seconds) between retries.

    Returns:
        Ok(bytes) with the file contents, or Err with the last error.
    """
    last_err: OSError = PermissionError(f"Could not read file: {path}")

    for attempt in range(1, retries + 1):
        try:
            with open(path, "rb") as file_obj:
                return Result.Ok(file_obj.read())
        except PermissionError as exc:
            log_debug(f"Permission denied reading [{path}], attempt {attempt}/{retries}")
            last_err = exc
            time.sleep(delay)
        except OSError as exc:
            return Result.Err(exc)

    return Result.Err(last_err)
