"""Resolution of raw command line tokens into a :class:`MergeRequest`."""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence

from .exceptions import HelpRequested, InvalidArgument, UsageError
from .expander import expand_directory
from .types import Flag, MergeRequest
from .utils import absolute_path, get_logger

LOGGER = get_logger("mergepdf.arguments")

OUTPUT_FLAG = "-o"
HELP_FLAGS = ("-h", "--help")
MIN_TOKENS = 3


def collect_flags(tokens: Sequence[str]) -> FrozenSet[Flag]:
    """Return the recognised flags found anywhere in *tokens*.

    The token following ``-o`` is the output path and is never read as a
    flag.
    """

    flags = set()
    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token == OUTPUT_FLAG:
            skip_next = True
            continue
        flag = Flag.from_token(token)
        if flag is not None:
            flags.add(flag)
    return frozenset(flags)


def _check_input(token: str) -> Path:
    if not os.path.exists(token):
        LOGGER.debug("Input %s does not exist", token)
        raise InvalidArgument(f"{token} does not exist.")
    return Path(token)


def resolve_arguments(tokens: Sequence[str]) -> MergeRequest:
    """Turn the command line *tokens* into a :class:`MergeRequest`.

    Inputs keep their command line order; directories are expanded in
    place. Flags may appear anywhere, including before the directories
    they affect.

    Raises:
        HelpRequested: If the first token is ``-h`` or ``--help``.
        UsageError: If there are too few tokens, ``-o`` has no value, no
            output was given or nothing is left to merge.
        InvalidArgument: If an input path does not exist.
        DirectoryUnreadable: If a directory input cannot be listed.
    """

    tokens = list(tokens)
    if tokens and tokens[0] in HELP_FLAGS:
        raise HelpRequested()
    if len(tokens) < MIN_TOKENS:
        raise UsageError("Not enough arguments.")

    flags = collect_flags(tokens)
    inputs: List[Path] = []
    output: Optional[str] = None

    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == OUTPUT_FLAG:
            if index + 1 >= len(tokens):
                raise UsageError("No output file entered.")
            output = tokens[index + 1]
            index += 2
            continue
        if Flag.from_token(token) is None:
            candidate = _check_input(token)
            if candidate.is_dir():
                expand_directory(candidate, flags, into=inputs)
            else:
                inputs.append(absolute_path(candidate))
        index += 1

    if output is None:
        raise UsageError("No output file entered.")
    if not inputs:
        raise UsageError("No input files to merge.")

    request = MergeRequest(inputs=tuple(inputs), output=Path(output), flags=flags)
    LOGGER.debug(
        "Resolved %d input(s) into %s with flags %s",
        len(request.inputs),
        request.output,
        sorted(flag.value for flag in flags),
    )
    return request


__all__ = ["OUTPUT_FLAG", "HELP_FLAGS", "MIN_TOKENS", "collect_flags", "resolve_arguments"]
