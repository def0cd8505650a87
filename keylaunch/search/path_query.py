"""Parse raw launcher queries into directory/prefix path descriptions.

A query is a path query when it starts with ``/`` or ``~``. The resolved form
expands a leading ``~`` to the home directory, while the display form keeps
the user's spelling so completions shown back in the query field still read
``~/...``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..system import home_directory, is_directory, safe_stat

PATH_QUERY_PREFIXES = ("/", "~")


@dataclass(frozen=True)
class PathQuery:
    """Structured view of one path query.

    ``directory_path`` and ``directory_display_prefix`` always end with ``/``.
    ``is_directory`` is decided once, from a stat of ``resolved_path``, and
    drives the split of both the resolved and the display forms.
    """

    original_query: str
    resolved_path: str
    directory_path: str
    filename_prefix: str
    directory_display_prefix: str
    is_directory: bool = False


def is_path_query(query: str) -> bool:
    return query.startswith(PATH_QUERY_PREFIXES)


def expand_query_path(query: str) -> tuple[bool, str]:
    """Return ``(is_path, path)`` with a leading ``~`` replaced by the home directory.

    Non-path queries come back unchanged with ``is_path`` false.
    """
    if not is_path_query(query):
        return False, query
    if query.startswith("~"):
        return True, home_directory() + query[1:]
    return True, query


def _split_directory(path: str, is_dir: bool) -> tuple[str, str]:
    """Split ``path`` into ``(directory, filename)``.

    Existing directories keep the whole path (plus a trailing ``/``) as their
    directory part. Otherwise everything through the last ``/`` is the
    directory and the rest is the filename; ``path`` must contain a ``/``.
    """
    if is_dir:
        return (path if path.endswith("/") else path + "/"), ""
    slash = path.rfind("/")
    if slash < 0:
        raise ValueError(f"path has no directory separator: {path!r}")
    return path[: slash + 1], path[slash + 1 :]


def resolve_path_query(query: str) -> tuple[bool, PathQuery | None]:
    """Resolve ``query`` against the filesystem.

    Returns ``(False, None)`` for empty and relative queries. Stat failures
    count as "does not exist" and never raise.
    """
    is_path, resolved_path = expand_query_path(query)
    if not is_path:
        return False, None

    is_dir = is_directory(safe_stat(resolved_path))
    directory_path, filename_prefix = _split_directory(resolved_path, is_dir)

    # A bare "~name" has no separator of its own; its completions fall back
    # to the expanded directory.
    if is_dir or "/" in query:
        directory_display_prefix, _display_name = _split_directory(query, is_dir)
    else:
        directory_display_prefix = directory_path

    return True, PathQuery(
        original_query=query,
        resolved_path=resolved_path,
        directory_path=directory_path,
        filename_prefix=filename_prefix,
        directory_display_prefix=directory_display_prefix,
        is_directory=is_dir,
    )


__all__ = [
    "PATH_QUERY_PREFIXES",
    "PathQuery",
    "expand_query_path",
    "is_path_query",
    "resolve_path_query",
]
