"""Convert HTTP method + path segments to URL getter names and templates.

Pattern: {method}{PascalCasedPath}, with every {param} segment read as
"by {param}".

Examples (prefix "/api/v1"):
  GET    /api/v1/users                 -> getUsers
  GET    /api/v1/users/{id}            -> getUsersById
  POST   /api/v1/users/{id}/avatar     -> postUsersByIdAvatar
  DELETE /api/v1/user-groups/{groupId} -> deleteUserGroupsByGroupId

The URL getter renders as:
  export const getUsersById = ({id}) => `/api/v1/users/${id}`
"""

from __future__ import annotations

import re
from typing import Any

# Runs of letters and digits; separators are everything else
_RUN_RE = re.compile(r"[^\W_]+")


class DuplicatePathParameterError(ValueError):
    """A path template names the same placeholder more than once."""

    def __init__(self, name: str, location: list[str]) -> None:
        self.name = name
        self.location = location
        super().__init__(
            f"path parameter {name!r} appears more than once in /{'/'.join(location)}"
        )


def _char_kind(ch: str) -> str:
    if ch.isdigit():
        return "digit"
    if ch.isupper():
        return "upper"
    return "lower"


def _split_humps(run: str) -> list[str]:
    """Split one alphanumeric run on case humps and digit boundaries."""
    words: list[str] = []
    current = run[0]
    for ch in run[1:]:
        kind = _char_kind(ch)
        prev = _char_kind(current[-1])
        if kind == "lower" and prev == "upper" and len(current) > 1:
            # End of an acronym: its last capital starts the next word
            words.append(current[:-1])
            current = current[-1] + ch
        elif kind == prev or (kind == "lower" and prev == "upper"):
            current += ch
        else:
            words.append(current)
            current = ch
    words.append(current)
    return words


def split_words(text: str) -> list[str]:
    """Split text into words on separators, camelCase humps and digits.

    Letters outside ASCII are kept and cased like any other letter.
    """
    return [word for run in _RUN_RE.findall(text) for word in _split_humps(run)]


def to_pascal_case(parts: list[str] | str) -> str:
    """PascalCase the words of one or more strings.

    Every word is lowercased then capitalised, so acronyms flatten:
    ``["HTTPServer", "id"]`` -> ``HttpServerId``.
    """
    if isinstance(parts, str):
        parts = [parts]
    words = [w for part in parts for w in split_words(part)]
    return "".join(w.lower().capitalize() for w in words)


def is_placeholder(segment: str) -> bool:
    """True for a ``{name}`` path segment."""
    return segment.startswith("{")


def _placeholder_name(segment: str) -> str:
    return segment[1:-1]


def extract_path_params(location: list[str]) -> list[str]:
    """Return placeholder names in path order, rejecting repeats."""
    params: list[str] = []
    for segment in location:
        if not is_placeholder(segment):
            continue
        name = _placeholder_name(segment)
        if name in params:
            raise DuplicatePathParameterError(name, location)
        params.append(name)
    return params


def build_url_template(location: list[str], path_prefix: str) -> str:
    """Render the path as a template literal interpolating its params."""
    nodes = [path_prefix]
    for segment in location:
        if is_placeholder(segment):
            nodes.append("${" + _placeholder_name(segment) + "}")
        else:
            nodes.append(segment)
    return "`" + "/".join(nodes) + "`"


def build_url_getter_name(method: str, location: list[str]) -> str:
    """Build the getter name, e.g. ``getUsersById``."""
    words: list[str] = []
    for segment in location:
        if is_placeholder(segment):
            words.extend(["by", segment])
        else:
            words.append(segment)
    return f"{method}{to_pascal_case(words)}"


def derive_url_getter(
    method: str,
    location: list[str],
    path_prefix: str,
) -> dict[str, Any]:
    """Derive the URL getter for one endpoint.

    ``location`` is the path split on ``/`` with the shared prefix
    removed. Returns the getter ``name``, its ``code``, the ordered
    placeholder ``params`` and their destructuring ``params_code``.
    """
    params = extract_path_params(location)
    params_code = "{" + ",".join(params) + "}" if params else ""
    name = build_url_getter_name(method, location)
    template = build_url_template(location, path_prefix)
    code = f"export const {name} = ({params_code}) => {template}"
    return {
        "code": code,
        "name": name,
        "params_code": params_code,
        "params": params,
    }
