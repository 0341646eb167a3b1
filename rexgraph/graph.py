# coding: utf-8
"""
    rexgraph.graph
    ~~~~~~~~~~~~~~

    The state graph a pattern compiles to. States are addressed by integer
    ids, transitions either consume a character out of a :class:`CharSet` or
    are epsilon transitions, which is represented by a label of `None`.

    A graph is not changed after it has been built. Everything is enumerated
    in construction order, so the same pattern always yields the same ids in
    the same order.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from collections import namedtuple, deque
from types import MappingProxyType

from rexgraph.tokenizer import DEFAULT_LANGUAGE


State = namedtuple("State", ["id", "accepting"])


class Transition(namedtuple("Transition", ["source", "target", "label"])):
    __slots__ = ()

    @property
    def is_epsilon(self):
        return self.label is None


class CharSet(object):
    def __init__(self, items, negated=False):
        self.items = frozenset(items)
        self.negated = negated

    def __contains__(self, character):
        for item in self.items:
            if isinstance(item, str):
                if item == character:
                    return not self.negated
            elif character in item:
                return not self.negated
        return self.negated

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.items == other.items and
                self.negated == other.negated
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.items) ^ hash(self.negated)

    def __str__(self):
        if self.negated and not self.items:
            return "."
        if not self.negated and len(self.items) == 1:
            item, = self.items
            if isinstance(item, str):
                return item
        escape = DEFAULT_LANGUAGE.escape_character
        members = []
        for item in sorted(self.items, key=item_sort_key):
            if isinstance(item, str):
                members.append(escape(item, in_class=True))
            else:
                members.append("%s-%s" % (
                    escape(item.start, in_class=True),
                    escape(item.end, in_class=True)
                ))
        return "[%s%s]" % ("^" if self.negated else "", "".join(members))

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__,
            self.items,
            self.negated
        )


def item_sort_key(item):
    if isinstance(item, str):
        return (item, item)
    return (item.start, item.end)


class StateGraph(object):
    def __init__(self, states, transitions, start, accept):
        self.states = MappingProxyType(dict(
            (state.id, state) for state in states
        ))
        self.transitions = tuple(transitions)
        self.start = start
        self.accept = frozenset(accept)
        self._outgoing = dict((state_id, []) for state_id in self.states)
        for transition in self.transitions:
            self._outgoing[transition.source].append(transition)

    def is_accepting(self, state_id):
        return self.states[state_id].accepting

    def transitions_from(self, state_id):
        """
        Returns the transitions leaving `state_id` in construction order.
        """
        return tuple(self._outgoing[state_id])

    def epsilon_closure(self, state_ids):
        """
        Returns the states reachable from `state_ids`, a single id or an
        iterable of ids, using only epsilon transitions. The given states are
        part of their closure.
        """
        if isinstance(state_ids, int):
            state_ids = [state_ids]
        closure = set(state_ids)
        stack = list(closure)
        while stack:
            for transition in self._outgoing[stack.pop()]:
                if transition.is_epsilon and transition.target not in closure:
                    closure.add(transition.target)
                    stack.append(transition.target)
        return frozenset(closure)

    def move(self, state_ids, character):
        """
        Returns the states reached from `state_ids` by consuming `character`.
        No epsilon closure is applied, neither before nor after the move.
        """
        if isinstance(state_ids, int):
            state_ids = [state_ids]
        targets = set()
        for state_id in state_ids:
            for transition in self._outgoing[state_id]:
                if (not transition.is_epsilon and
                        character in transition.label):
                    targets.add(transition.target)
        return frozenset(targets)

    def reachable(self):
        seen = set([self.start])
        queue = deque([self.start])
        while queue:
            for transition in self._outgoing[queue.popleft()]:
                if transition.target not in seen:
                    seen.add(transition.target)
                    queue.append(transition.target)
        return frozenset(seen)

    def to_dot(self):
        """
        Returns the graph in the DOT language of Graphviz.
        """
        lines = ["digraph {", "\trankdir=LR"]
        for state in self.states.values():
            attributes = ['label="%d"' % state.id]
            if state.accepting:
                attributes.append('shape="doublecircle"')
            if state.id == self.start:
                attributes.append('color="blue"')
            elif state.accepting:
                attributes.append('color="green"')
            lines.append("\tS%d [%s]" % (state.id, ", ".join(attributes)))
        for transition in self.transitions:
            if transition.is_epsilon:
                label = "ε"
            else:
                label = str(transition.label)
            lines.append('\tS%d -> S%d [label="%s"]' % (
                transition.source,
                transition.target,
                label.replace("\\", "\\\\").replace('"', '\\"')
            ))
        lines.append("}")
        return "\n".join(lines)

    def __len__(self):
        return len(self.states)

    def __repr__(self):
        return "%s(%r, %r, %r, %r)" % (
            self.__class__.__name__,
            list(self.states.values()),
            list(self.transitions),
            self.start,
            sorted(self.accept)
        )
