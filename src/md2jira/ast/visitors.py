#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/visitors.py
"""Enter/exit traversal of the document tree.

This module provides the depth-first walker used by renderers. A walker
subclass registers one handler per :class:`~md2jira.ast.nodes.NodeKind`; the
handler is called twice per node, once on the way down (``entering=True``)
and once on the way back up (``entering=False``).

Node kinds are split into three groups:

- leaf kinds, whose content is taken straight from the node and whose
  children (if any) are never walked
- self-managing kinds, whose handler renders its own children with a
  restricted rule set
- container kinds (everything else), whose children are walked generically

A kind without a handler is treated as a plain container, so unknown nodes
degrade to rendering their children instead of failing.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Mapping, Optional, Protocol, TypeVar

from md2jira.ast.nodes import Node, NodeKind

logger = logging.getLogger(__name__)

LEAF_KINDS = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.CODE_SPAN,
        NodeKind.FENCED_CODE_BLOCK,
        NodeKind.CODE_BLOCK,
        NodeKind.THEMATIC_BREAK,
        NodeKind.HTML_BLOCK,
        NodeKind.RAW_HTML,
        NodeKind.TASK_CHECKBOX,
    }
)

SELF_MANAGING_KINDS = frozenset(
    {
        NodeKind.LINK,
        NodeKind.IMAGE,
        NodeKind.AUTOLINK,
    }
)


class WalkState(Protocol):
    """Per-walk state the walker needs: a stack of the nodes being traversed."""

    ancestors: list[Node]


StateT = TypeVar("StateT", bound=WalkState)

Handler = Callable[[Node, Any, bool], None]


class TreeWalker(ABC, Generic[StateT]):
    """Depth-first enter/exit walker dispatching on node kind.

    Subclasses implement :meth:`handlers` to map node kinds to handler
    callables taking ``(node, state, entering)``. State is passed explicitly
    and never stored on the walker, so one walker instance can serve
    independent walks concurrently.

    Examples
    --------
    Counting headings:

        >>> class HeadingCounter(TreeWalker):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def handlers(self):
        ...         return {NodeKind.HEADING: self._heading}
        ...     def _heading(self, node, state, entering):
        ...         if entering:
        ...             self.count += 1

    """

    _handler_cache: Optional[Mapping[NodeKind, Handler]] = None

    @abstractmethod
    def handlers(self) -> Mapping[NodeKind, Handler]:
        """Return the mapping of node kinds to enter/exit handlers."""

    def _get_handlers(self) -> Mapping[NodeKind, Handler]:
        if self._handler_cache is None:
            self._handler_cache = self.handlers()
        return self._handler_cache

    def walk(self, node: Node, state: StateT) -> None:
        """Walk ``node`` and its descendants.

        Parameters
        ----------
        node : Node
            Root of the subtree to walk
        state : WalkState
            Mutable per-walk state; ``state.ancestors`` is kept in sync with the
            current path from the root

        """
        handler = self._get_handlers().get(node.kind)
        if handler is None:
            logger.debug("No handler for %s, rendering children", node.kind.value)

        if handler is not None:
            handler(node, state, True)

        if node.kind not in LEAF_KINDS and node.kind not in SELF_MANAGING_KINDS:
            self.walk_children(node, state)

        if handler is not None:
            handler(node, state, False)

    def walk_children(self, node: Node, state: StateT) -> None:
        """Walk every child of ``node`` in document order."""
        state.ancestors.append(node)
        try:
            for child in node.children:
                self.walk(child, state)
        finally:
            state.ancestors.pop()


def parent_of(state: WalkState) -> Optional[Node]:
    """Return the parent of the node currently being handled, if any."""
    return state.ancestors[-1] if state.ancestors else None


def is_last_child(node: Node, state: WalkState) -> bool:
    """Return True when ``node`` is the last child of its parent."""
    parent = parent_of(state)
    if parent is None or not parent.children:
        return True
    return parent.children[-1] is node
