"""Path translation between host and container filesystems.

Rules map a host path prefix to a container path prefix. A path is
rewritten by the rule with the longest matching prefix, so nested
mappings (``/workspaces`` and ``/workspaces/project``) resolve to the
most specific one.

Matching is a plain string prefix test, not path-segment aware:
``/workspaces2`` is rewritten by a ``/workspaces`` rule.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import NamedTuple

__all__ = ["PathTranslation", "translate_args", "translate_path"]


class PathTranslation(NamedTuple):
    """Result of translating one path.

    Attributes:
        path: Translated path, or the input when nothing matched.
        matched: True if a rule matched, even when the result is unchanged.

    """

    path: str
    matched: bool


def translate_path(path: str, rules: Mapping[str, str]) -> PathTranslation:
    """Translate a path using the longest matching prefix rule.

    Two distinct prefixes of equal length can never both prefix the same
    string, so ties do not occur; the first rule seen is kept regardless.
    An empty source prefix never matches.

    Args:
        path: Host path (or any argument string).
        rules: Host prefix to container prefix.

    Returns:
        PathTranslation with the rewritten path and whether a rule matched.

    """
    longest_prefix = ""
    longest_target = ""
    for source, target in rules.items():
        if len(source) > len(longest_prefix) and path.startswith(source):
            longest_prefix = source
            longest_target = target

    if not longest_prefix:
        return PathTranslation(path, False)
    return PathTranslation(longest_target + path[len(longest_prefix):], True)


def translate_args(args: Sequence[str], rules: Mapping[str, str]) -> list[str]:
    """Translate every argument independently.

    Arguments that match no rule are kept as they are. The input is
    never modified; a new list is returned.
    """
    return [translate_path(arg, rules).path for arg in args]
