# coding: utf-8
"""
    rexgraph
    ~~~~~~~~

    Compiles regular expressions into nondeterministic finite state graphs.
    A pattern is tokenized, parsed into a tree and the tree is turned into a
    graph with epsilon transitions using Thompson's construction::

        >>> graph = compile("a*b")
        >>> graph.start in graph.states
        True

    The graph is meant to be consumed by matchers or renderers, it provides
    epsilon closures, transitions per state and can be exported to DOT. It
    does not match strings itself.

    As "regular expressions" actually means *regular* here, backreferences and
    lookahead/-behind assertions are not supported. Groups only affect
    precedence.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from rexgraph.tokenizer import (
    RegexException, LexError, Language, DEFAULT_LANGUAGE, tokenize
)
from rexgraph.parser import ParseError, Parser, parse
from rexgraph.builder import StateGraphBuilder, build
from rexgraph.graph import StateGraph


__all__ = [
    "RegexException", "LexError", "ParseError", "Language",
    "DEFAULT_LANGUAGE", "tokenize", "Parser", "parse", "StateGraphBuilder",
    "build", "StateGraph", "compile"
]


def compile(pattern, language=DEFAULT_LANGUAGE):
    return build(parse(pattern, language))
