# coding: utf-8
"""
    rexgraph.builder
    ~~~~~~~~~~~~~~~~

    Compiles a regular expression tree into a :class:`StateGraph` using
    Thompson's construction. Every node of the tree becomes a fragment with an
    entry and an exit state, fragments are wired together with epsilon
    transitions. States are never shared between fragments, so the size of
    the graph grows linearly with the size of the tree.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from collections import namedtuple

from rexgraph.graph import State, Transition, CharSet, StateGraph


Fragment = namedtuple("Fragment", ["entry", "exit"])


class StateGraphBuilder(object):
    def __init__(self):
        self.states = []
        self.transitions = []

    def build(self, regex):
        self.states = []
        self.transitions = []
        fragment = regex.to_fragment(self)
        return StateGraph(
            [State(id, id == fragment.exit) for id in self.states],
            self.transitions,
            fragment.entry,
            [fragment.exit]
        )

    def new_state(self):
        state = len(self.states)
        self.states.append(state)
        return state

    def connect(self, source, target, label=None):
        self.transitions.append(Transition(source, target, label))

    def epsilon(self):
        state = self.new_state()
        return Fragment(state, state)

    def literal(self, character):
        return self.char_class([character])

    def char_class(self, items, negated=False):
        entry = self.new_state()
        exit = self.new_state()
        self.connect(entry, exit, CharSet(items, negated))
        return Fragment(entry, exit)

    def concat(self, fragments):
        if not fragments:
            return self.epsilon()
        for previous, following in zip(fragments, fragments[1:]):
            self.connect(previous.exit, following.entry)
        return Fragment(fragments[0].entry, fragments[-1].exit)

    def alternation(self, fragments):
        entry = self.new_state()
        exit = self.new_state()
        for fragment in fragments:
            self.connect(entry, fragment.entry)
            self.connect(fragment.exit, exit)
        return Fragment(entry, exit)

    def zero_or_more(self, fragment):
        entry = self.new_state()
        exit = self.new_state()
        self.connect(entry, fragment.entry)
        self.connect(fragment.exit, entry)
        self.connect(entry, exit)
        return Fragment(entry, exit)

    def zero_or_one(self, fragment):
        entry = self.new_state()
        exit = self.new_state()
        self.connect(entry, fragment.entry)
        self.connect(fragment.exit, exit)
        self.connect(entry, exit)
        return Fragment(entry, exit)

    def repeat(self, compile_child, minimum, maximum):
        """
        Returns a fragment matching the fragments returned by `compile_child`
        between `minimum` and `maximum` times. `compile_child` is called once
        for every copy needed, each call must compile the child anew.
        """
        if (minimum, maximum) == (0, None):
            return self.zero_or_more(compile_child())
        elif (minimum, maximum) == (0, 1):
            return self.zero_or_one(compile_child())
        fragments = [compile_child() for _ in range(minimum)]
        if maximum is None:
            fragments.append(self.zero_or_more(compile_child()))
        else:
            for _ in range(maximum - minimum):
                fragments.append(self.zero_or_one(compile_child()))
        return self.concat(fragments)


def build(regex):
    return StateGraphBuilder().build(regex)
