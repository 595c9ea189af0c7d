"""The shell's ordered table of environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Environment:
    """Ordered mapping of variable names to values.

    A value of None marks a variable that is declared (exported) without a
    value; such variables are not passed on to child programs.
    """

    def __init__(self, items: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars: dict[str, str | None] = {}
        for key, value in items:
            self.set(key, value)

    @classmethod
    def from_envp(cls, envp: Iterable[str]) -> Environment:
        """Build from ``KEY=VALUE`` strings; entries without ``=`` are skipped.

        When a key occurs twice the first occurrence wins.
        """
        env = cls()
        for entry in envp:
            key, sep, value = entry.partition("=")
            if not sep or key in env._vars:
                continue
            env._vars[key] = value
        return env

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None if unset or without a value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Set ``key``, keeping its position if it exists, appending otherwise."""
        self._vars[key] = value

    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._vars.pop(key, None)

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        return iter(list(self._vars.items()))

    def to_envp(self) -> list[str]:
        """Return ``KEY=VALUE`` strings for every variable that has a value."""
        return [f"{key}={value}" for key, value in self._vars.items() if value is not None]

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._vars.items())!r})"