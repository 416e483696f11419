"""Lenient go.mod reader.

Only the `module` statement is interpreted. Everything else in the file
(require/replace blocks, unknown directives, even lines the Go toolchain would
reject) is skipped, so a go.mod written for a newer toolchain still yields its
module path.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from gobranchdocs.core.errors import ModuleDeclarationInvalid, ModuleFileNotFound

logger = logging.getLogger(__name__)

GO_MOD_FILENAME = "go.mod"


@dataclass(frozen=True)
class _Token:
    text: str
    quoted: bool

    def is_punct(self, char: str) -> bool:
        return not self.quoted and self.text == char


class _SyntaxError(Exception):
    pass


def read_module_path(directory: Path) -> str:
    """Read the module path declared by `directory/go.mod`.

    Raises:
        ModuleFileNotFound: If go.mod is absent or unreadable
        ModuleDeclarationInvalid: If the module statement is missing or malformed
    """
    gomod_path = directory / GO_MOD_FILENAME
    try:
        data = gomod_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModuleFileNotFound(gomod_path, str(e)) from e

    module_path = parse_module_path(data, filename=str(gomod_path))
    logger.debug("module path from %s: %s", gomod_path, module_path)
    return module_path


def parse_module_path(data: str, filename: str = GO_MOD_FILENAME) -> str:
    """Extract the module path from go.mod contents.

    Accepts `module example.com/m`, quoted paths and the `module ( ... )` block
    form. Lines that are not module statements are never rejected.

    Raises:
        ModuleDeclarationInvalid: If there is no module statement, or the module
            statement is malformed or repeated
    """
    module_path: str | None = None
    block_verb: str | None = None

    for lineno, line in enumerate(data.splitlines(), start=1):
        try:
            tokens = _tokenize(line)
        except _SyntaxError as e:
            if block_verb == "module" or line.split()[:1] == ["module"]:
                raise ModuleDeclarationInvalid(filename, str(e), line=lineno) from e
            continue

        if not tokens:
            continue

        if block_verb is not None:
            if len(tokens) == 1 and tokens[0].is_punct(")"):
                block_verb = None
                continue
            if block_verb != "module":
                continue
            args = tokens
        else:
            verb = tokens[0]
            if verb.quoted:
                continue
            if len(tokens) == 2 and tokens[1].is_punct("("):
                block_verb = verb.text
                continue
            if verb.text != "module":
                continue
            args = tokens[1:]

        if module_path is not None:
            raise ModuleDeclarationInvalid(filename, "repeated module statement", line=lineno)
        module_path = _module_path_from_args(args, filename, lineno)

    if module_path is None:
        raise ModuleDeclarationInvalid(filename, "no module statement found")
    return module_path


def escape_module_path(path: str) -> str:
    """Case-encode a module path for the module proxy protocol.

    Upper-case letters become "!" followed by the lower-case letter, so that
    proxies backed by case-insensitive file systems keep paths distinct.
    """
    escaped: list[str] = []
    for char in path:
        if "A" <= char <= "Z":
            escaped.append("!" + char.lower())
        else:
            escaped.append(char)
    return "".join(escaped)


def _module_path_from_args(args: list[_Token], filename: str, lineno: int) -> str:
    if len(args) != 1 or args[0].is_punct("(") or args[0].is_punct(")"):
        raise ModuleDeclarationInvalid(filename, "usage: module module/path", line=lineno)

    path = args[0].text.strip()
    if not path:
        raise ModuleDeclarationInvalid(filename, "empty module path", line=lineno)
    if any(char.isspace() for char in path):
        raise ModuleDeclarationInvalid(
            filename, f"module path {path!r} contains whitespace", line=lineno
        )
    if "!" in path:
        raise ModuleDeclarationInvalid(
            filename, f"module path {path!r} contains '!'", line=lineno
        )
    return path


def _tokenize(line: str) -> list[_Token]:
    tokens: list[_Token] = []
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char.isspace():
            i += 1
        elif line.startswith("//", i):
            break
        elif char in "()":
            tokens.append(_Token(char, quoted=False))
            i += 1
        elif char == '"':
            end = _find_closing_quote(line, i)
            try:
                text = json.loads(line[i : end + 1])
            except json.JSONDecodeError as e:
                raise _SyntaxError(f"invalid quoted string: {e.msg}") from e
            tokens.append(_Token(text, quoted=True))
            i = end + 1
        elif char == "`":
            end = line.find("`", i + 1)
            if end == -1:
                raise _SyntaxError("unterminated raw string")
            tokens.append(_Token(line[i + 1 : end], quoted=True))
            i = end + 1
        else:
            start = i
            while (
                i < n
                and not line[i].isspace()
                and line[i] not in '()"`'
                and not line.startswith("//", i)
            ):
                i += 1
            tokens.append(_Token(line[start:i], quoted=False))
    return tokens


def _find_closing_quote(line: str, start: int) -> int:
    i = start + 1
    while i < len(line):
        if line[i] == "\\":
            i += 2
            continue
        if line[i] == '"':
            return i
        i += 1
    raise _SyntaxError("unterminated quoted string")
