"""Command line argument inspection."""

import sys
from typing import Optional, Sequence, Union


def argv(param: str, args: Optional[Sequence[str]] = None) -> Union[str, bool]:
    """Look up a single argument on the command line.

    If ``param`` starts with ``-`` and is followed by a value that does not
    itself start with ``-``, that value is returned. Otherwise the result is
    ``True`` when ``param`` is present and ``False`` when it is not. Grouped
    short flags are matched literally, so ``-t`` does not match ``-tf``.

    Args:
        param: The argument to look for (e.g., "--port", "-n").
        args: Arguments to scan. Defaults to ``sys.argv[1:]``.

    Returns:
        The argument's value, True if present without a value, or False.

    Example:
        # command line: --port 8080 -n -tf
        argv("--port")  # => "8080"
        argv("-n")      # => True
        argv("-g")      # => False
        argv("-t")      # => False
        argv("-tf")     # => True
    """
    tokens = list(sys.argv[1:] if args is None else args)
    for index, token in enumerate(tokens):
        if token != param:
            continue
        if (
            param.startswith("-")
            and index + 1 < len(tokens)
            and not tokens[index + 1].startswith("-")
        ):
            return tokens[index + 1]
        return True
    return False
