"""Context values for mustache rendering: lookup, emptiness and display."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from explorerkit.template_token import html_escape


class TemplateObject:
    """A context value whose fields are computed by registered methods.

    Each lookup calls the method again and keeps the latest result.
    """

    def __init__(self) -> None:
        self._methods: dict[str, Callable[[], Any]] = {}
        self._cache: dict[str, Any] = {}

    def register_methods(self, methods: Mapping[str, Callable[[], Any]]) -> None:
        """Add methods by name; names already registered keep their method."""
        for name, method in methods.items():
            self._methods.setdefault(name, method)

    def has(self, name: str) -> bool:
        return name in self._methods

    def at(self, name: str) -> Any:
        """Call the named method and return its result; KeyError if unknown."""
        self._cache[name] = self._methods[name]()
        return self._cache[name]


def is_node_empty(node: Any) -> bool:
    """Whether a value counts as false for a section."""
    if node is None:
        return True
    if isinstance(node, bool):
        return not node
    if isinstance(node, (int, float)):
        return node == 0
    if isinstance(node, str):
        return node == ""
    if isinstance(node, list):
        return len(node) == 0
    return False


def has_token(node: Any, token: str) -> bool:
    """Whether ``token`` can be looked up in ``node``."""
    if isinstance(node, Mapping):
        return token in node
    if isinstance(node, TemplateObject):
        return node.has(token)
    return token == "."


def get_token(node: Any, token: str) -> Any:
    """Look ``token`` up in ``node``; scalars and lists return themselves."""
    if isinstance(node, Mapping):
        return node[token]
    if isinstance(node, TemplateObject):
        return node.at(token)
    return node


def find_node(token: str, nodes: Iterable[Any]) -> Any:
    """Resolve a possibly dotted name against a stack of contexts, innermost first.

    Returns ``None`` when no context holds the name.
    """
    if token != "." and "." in token:
        prefix, last = token.rsplit(".", 1)
        return find_node(last, [find_node(prefix, nodes)])
    for node in nodes:
        if has_token(node, token):
            return get_token(node, token)
    return None


def render_value(node: Any, escape: bool = False) -> str:
    """Text shown for a value in a variable tag.

    Strings are HTML-escaped when ``escape`` is true; ``None``, mappings,
    lists, objects and callables render as empty text.
    """
    if isinstance(node, bool):
        return "true" if node else "false"
    if isinstance(node, int):
        return str(node)
    if isinstance(node, float):
        return format(node, "g")
    if isinstance(node, str):
        return html_escape(node) if escape else node
    return ""