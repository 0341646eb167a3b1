# coding: utf-8
"""
    rexgraph.ast
    ~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from rexgraph.builder import build


class Regex(object):
    def to_fragment(self, builder):
        raise NotImplementedError()

    def to_graph(self):
        return build(self)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return True
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "%s()" % self.__class__.__name__


class Epsilon(Regex):
    """
    Matches only the empty string, this is what an empty concatenation such
    as ``""`` or ``()`` parses to.
    """

    def __hash__(self):
        return 0

    def to_fragment(self, builder):
        return builder.epsilon()


class Literal(Regex):
    def __init__(self, character):
        self.character = character

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.character == other.character
        return NotImplemented

    def __hash__(self):
        return hash(self.character)

    def to_fragment(self, builder):
        return builder.literal(self.character)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.character)


class Range(object):
    def __init__(self, start, end):
        self.start = start
        self.end = end

    def __contains__(self, character):
        return self.start <= character <= self.end

    def __iter__(self):
        for i in range(ord(self.start), ord(self.end) + 1):
            yield chr(i)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.start == other.start and self.end == other.end
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.start, self.end))

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.start, self.end)


class CharClass(Regex):
    """
    Matches a single character that is one of `items`, or none of them if
    `negated` is true. `items` contains characters and :class:`Range`
    objects. The wildcard is an empty negated class.
    """

    def __init__(self, items, negated=False):
        self.items = frozenset(items)
        self.negated = negated

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.items == other.items and
                self.negated == other.negated
            )
        return NotImplemented

    def __hash__(self):
        return hash(self.items) ^ hash(self.negated)

    def to_fragment(self, builder):
        return builder.char_class(self.items, self.negated)

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__,
            self.items,
            self.negated
        )


class Operator(Regex):
    def __init__(self, children):
        self.children = tuple(children)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.children == other.children
        return NotImplemented

    def __hash__(self):
        return hash(self.children)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, list(self.children))


class Concat(Operator):
    def to_fragment(self, builder):
        return builder.concat([
            child.to_fragment(builder) for child in self.children
        ])


class Alternation(Operator):
    def to_fragment(self, builder):
        return builder.alternation([
            child.to_fragment(builder) for child in self.children
        ])


class Repeat(Regex):
    """
    Matches `child` at least `minimum` and at most `maximum` times, a
    `maximum` of `None` means there is no upper bound.
    """

    def __init__(self, child, minimum=0, maximum=None):
        self.child = child
        self.minimum = minimum
        self.maximum = maximum

    def to_fragment(self, builder):
        return builder.repeat(
            lambda: self.child.to_fragment(builder),
            self.minimum,
            self.maximum
        )

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.child == other.child and
                self.minimum == other.minimum and
                self.maximum == other.maximum
            )
        return NotImplemented

    def __hash__(self):
        return hash(self.child) ^ hash((self.minimum, self.maximum))

    def __repr__(self):
        return "%s(%r, %r, %r)" % (
            self.__class__.__name__,
            self.child,
            self.minimum,
            self.maximum
        )


class Group(Regex):
    def __init__(self, child, index=None):
        self.child = child
        self.index = index

    def to_fragment(self, builder):
        return self.child.to_fragment(builder)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.child == other.child and self.index == other.index
        return NotImplemented

    def __hash__(self):
        return hash(self.child) ^ hash(self.index)

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__,
            self.child,
            self.index
        )
