"""Command-line parsing into a command, positional arguments and options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from .hashtable import HASH_EXTEND_MULTIPLIER, Hashtable


class ArgumentError(ValueError):
    """Raised when an option is given more than once."""


def _filename(path: str) -> str:
    return path[max(path.rfind("/"), path.rfind("\\")) + 1:]


@dataclass
class Args:
    """Parsed command line."""

    name: str = ""
    cmd: str | None = None
    opts: Hashtable = field(default_factory=Hashtable)
    optc: int = 0
    argv: list[str] = field(default_factory=list)

    @property
    def argc(self) -> int:
        return len(self.argv)

    def has_opt(self, opt: str) -> bool:
        return self.opts.has(opt)

    def get_opt(self, opt: str) -> str | None:
        """Return the option's value, or None if it is absent or carries no value."""
        return self.opts.get(opt)

    def remove_opt(self, opt: str) -> str | None:
        """Remove an option and return its value; raise KeyError if absent."""
        value = self.opts.remove(opt)
        self.optc -= 1
        return value

    def has_opts(self, *opts: str) -> int:
        """Return how many of the given options are present."""
        return sum(1 for opt in opts if self.opts.has(opt))

    def test_opts(self, *opts: str) -> bool:
        """True when every option given on the command line is among ``opts``."""
        return len(self.opts) - self.has_opts(*opts) == 0

    def test_arg(self, min_argc: int, max_argc: int, *opts: str) -> bool:
        """True when the argument count lies in range and every option is supported."""
        if not min_argc <= self.argc <= max_argc:
            return False
        return self.test_opts(*opts)


def parse_args(
    argv: Sequence[str], convert: Callable[[str], str] | None = None
) -> Args:
    """Parse ``argv`` (program path first) into an :class:`Args`.

    Long options are ``--name`` or ``--name=value``; short options may be
    combined (``-abc``). The first non-option is the command, the rest are
    arguments. ``convert`` is applied to option values and arguments.
    """
    conv = convert if convert is not None else str
    name = _filename(argv[0]) if argv else ""
    rest = list(argv[1:])
    optc = sum(1 for item in rest if item.startswith("-"))
    result = Args(
        name=name,
        opts=Hashtable(int(optc * HASH_EXTEND_MULTIPLIER)),
        optc=optc,
    )
    for item in rest:
        if item.startswith("--"):
            key, sep, value = item[2:].partition("=")
            if result.opts.has(key):
                raise ArgumentError(f"option specified more than once: {key}")
            result.opts.add(key, conv(value) if sep else None)
        elif item.startswith("-"):
            for letter in item[1:]:
                if result.opts.has(letter):
                    raise ArgumentError(f"option specified more than once: {letter}")
                result.opts.add(letter, None)
        elif result.cmd is None:
            result.cmd = item
        else:
            result.argv.append(conv(item))
    return result