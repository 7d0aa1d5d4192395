"""
Content scope: which source files are scanned for utility-class usage.

Patterns follow the glob dialect used by utility-CSS content settings:
``*`` and ``?`` stay within a path segment, ``**`` spans directories,
``{a,b}`` alternates (nested braces allowed), ``[abc]`` is a character
class and a leading ``!`` excludes.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path, PurePath

from loguru import logger


def expand_braces(pattern: str) -> list[str]:
    """
    Expand ``{a,b}`` alternations into separate patterns.

    A single alternative (``*.{tsx}``) expands to itself without braces.

    Examples
    --------
    >>> expand_braces("src/**/*.{ts,tsx}")
    ['src/**/*.ts', 'src/**/*.tsx']
    >>> expand_braces("{a,{b,c}}.js")
    ['a.js', 'b.js', 'c.js']
    """
    depth = 0
    start = 0
    for i, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = i
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                alternatives = _split_alternatives(pattern[start + 1 : i])
                prefix, suffix = pattern[:start], pattern[i + 1 :]
                expanded: list[str] = []
                for alternative in alternatives:
                    for result in expand_braces(prefix + alternative + suffix):
                        if result not in expanded:
                            expanded.append(result)
                return expanded
    return [pattern]


def _split_alternatives(body: str) -> list[str]:
    parts = []
    depth = 0
    current = ""
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if char == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += char
    parts.append(current)
    return parts


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Translate a brace-free glob into an anchored regular expression.

    Raises
    ------
    ValueError
        If the pattern does not compile, e.g. a reversed range ``[z-a]``.
    """
    out = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if pattern.startswith("**", i):
            at_start = i == 0 or pattern[i - 1] == "/"
            if at_start and pattern.startswith("**/", i):
                out.append("(?:.*/)?")
                i += 3
                continue
            if at_start and i + 2 == n:
                out.append(".*")
                i += 2
                continue
            out.append("[^/]*")
            i += 2
        elif char == "*":
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(char))
                i += 1
                continue
            body = pattern[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
        else:
            out.append(re.escape(char))
            i += 1
    try:
        return re.compile("^" + "".join(out) + "$")
    except re.error as e:
        raise ValueError(f"Invalid glob pattern {pattern!r}: {e}") from e


def normalize_path(path: str | PurePath) -> str:
    """Posix form without a leading ``./``."""
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text


@dataclass(frozen=True)
class _CompiledPattern:
    glob: str
    regex: re.Pattern[str]
    negated: bool


class ContentScope:
    """
    Ordered set of glob patterns deciding content-file membership.

    Parameters
    ----------
    patterns : Iterable[str]
        Globs relative to ``base_dir``. A leading ``!`` excludes.
    base_dir : str | Path | None
        Directory that absolute paths are made relative to.

    Examples
    --------
    >>> scope = ContentScope(["src/**/*.{tsx}"])
    >>> scope.matches("src/components/Button.tsx")
    True
    >>> scope.matches("node_modules/x/index.js")
    False
    """

    def __init__(self, patterns: Iterable[str], base_dir: str | Path | None = None):
        self.patterns = list(patterns)
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self._compiled: list[_CompiledPattern] = []
        self._duplicates: list[str] = []

        seen: set[tuple[bool, str]] = set()
        for raw in self.patterns:
            negated = raw.startswith("!")
            body = normalize_path(raw[1:] if negated else raw)
            for glob in expand_braces(body):
                key = (negated, glob)
                if key in seen:
                    self._duplicates.append(glob)
                    continue
                seen.add(key)
                self._compiled.append(
                    _CompiledPattern(glob=glob, regex=glob_to_regex(glob), negated=negated)
                )

    @property
    def expanded_patterns(self) -> list[str]:
        """Brace-expanded, deduplicated patterns (negations keep their ``!``)."""
        return [("!" if p.negated else "") + p.glob for p in self._compiled]

    @property
    def duplicate_patterns(self) -> list[str]:
        """Expanded patterns that were declared more than once."""
        return list(self._duplicates)

    def _relative(self, file_path: str | PurePath) -> str:
        path = Path(file_path)
        if self.base_dir is not None and path.is_absolute():
            try:
                path = path.relative_to(self.base_dir)
            except ValueError:
                pass
        return normalize_path(path.as_posix())

    def matches(self, file_path: str | PurePath) -> bool:
        """True iff the path matches an include pattern and no exclusion."""
        path = self._relative(file_path)
        included = False
        for pattern in self._compiled:
            if pattern.regex.match(path):
                if pattern.negated:
                    return False
                included = True
        return included

    def iter_files(self, root: str | Path | None = None) -> Iterator[Path]:
        """
        Yield every file under ``root`` that is in scope, once each.

        Overlapping patterns never yield a file twice because membership
        is decided per file rather than per pattern.
        """
        root = Path(root) if root is not None else self.base_dir or Path.cwd()
        count = 0
        for path in sorted(root.rglob("*")):
            if path.is_file() and self.matches(path.relative_to(root).as_posix()):
                count += 1
                yield path
        logger.debug(f"Content scope matched {count} files under {root}")

    def __contains__(self, file_path: object) -> bool:
        return isinstance(file_path, (str, PurePath)) and self.matches(file_path)

    def __repr__(self) -> str:
        return f"ContentScope({self.patterns!r})"


__all__ = [
    "ContentScope",
    "expand_braces",
    "glob_to_regex",
    "normalize_path",
]
