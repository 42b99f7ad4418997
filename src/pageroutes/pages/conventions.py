"""Filename conventions mapping page files to route paths and names.

Pure functions, no filesystem access::

    index.vue   -> parent path itself
    @id.vue     -> <parent>/:id
    *.vue       -> <parent>/:pathMatch(.*)
    a.vue       -> <parent>/a

Directories follow the dynamic and wildcard rules but never collapse
like ``index`` does, since they are not leaf files.
"""

import posixpath

# Token vue-router uses for a catch-all segment
CATCH_ALL = ":pathMatch(.*)"

# Stand-in for ``*`` in route names
FUZZY_TOKEN = "FUZZYMATCH"

INDEX_NAME = "index"


def _join(parent_path: str, name: str) -> str:
    """Join with forward slashes and normalise, on every platform."""
    joined = posixpath.join(parent_path.replace("\\", "/"), name.replace("\\", "/"))
    return posixpath.normpath(joined)


def route_name(parent_path: str, name: str) -> str:
    """Derive the default route name for a file under *parent_path*.

    ``route_name("/b", "@id")`` gives ``"b__id"`` and
    ``route_name("/", "*")`` gives ``"FUZZYMATCH"``.
    """
    joined = _join(parent_path, name)
    return joined[1:].replace("/", "_").replace("@", "_").replace("*", FUZZY_TOKEN)


def route_path(parent_path: str, name: str, is_file: bool = True) -> str:
    """Resolve the route path contributed by a file or directory.

    Args:
        parent_path: Route path of the containing directory.
        name: File stem or directory name.
        is_file: ``True`` for page files. Only files collapse ``index``.

    Returns:
        The normalised route path, e.g. ``"/b/:id"``.
    """
    if is_file and name == INDEX_NAME:
        name = ""
    if name.startswith("@"):
        name = ":" + name[1:]
    if "*" in name:
        name = name.replace("*", CATCH_ALL, 1)
    return _join(parent_path, name)
