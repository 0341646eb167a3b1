# coding: utf-8
"""
    rexgraph.parser
    ~~~~~~~~~~~~~~~

    Recursive descent parser turning tokens into a tree of
    :class:`rexgraph.ast.Regex` nodes. From lowest to highest precedence::

        alternation := concat ('|' concat)*
        concat      := quantified*
        quantified  := atom quantifier?
        atom        := character | '.' | class | '(' alternation ')'

    A quantifier always applies to the single atom in front of it, ``ab*`` is
    ``a`` followed by any number of ``b``.

    Groups may be nested at most :data:`MAX_DEPTH` levels deep, the parser and
    the builder both recurse once per level.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from itertools import count

from rexgraph.tokenizer import (
    RegexException, TokenStream, tokenize, DEFAULT_LANGUAGE, Character,
    AnyCharacter, ClassOpen, ClassClose, ClassNegate, ClassRange, GroupOpen,
    GroupClose, Alternate, Quantifier
)
from rexgraph.ast import (
    Epsilon, Literal, CharClass, Range, Concat, Alternation, Repeat, Group
)
from rexgraph.graph import item_sort_key


MAX_DEPTH = 64


class ParseError(RegexException):
    pass


class Parser(object):
    def __init__(self, language=DEFAULT_LANGUAGE, max_depth=MAX_DEPTH):
        self.language = language
        self.max_depth = max_depth

    def error(self, tokens, reason, position):
        return ParseError(reason, position, tokens.annotated(position))

    def parse(self, tokens):
        """
        Parses `tokens`, a :class:`TokenStream` or any iterable of tokens, and
        returns the tree. Errors are only annotated with the pattern, if the
        tokens come from a :class:`TokenStream` that knows it.
        """
        if not isinstance(tokens, TokenStream):
            tokens = TokenStream(tokens)
        result = self.parse_alternation(tokens, count(1), 0)
        token = tokens.lookahead()
        if token is not None:
            if isinstance(token, GroupClose):
                raise self.error(
                    tokens, "found unmatched %s" % token.lexeme, token.position
                )
            raise self.error(
                tokens, "unexpected %s" % token.lexeme, token.position
            )
        return result

    def parse_alternation(self, tokens, groups, depth):
        branches = [self.parse_concat(tokens, groups, depth)]
        separators = []
        while isinstance(tokens.lookahead(), Alternate):
            separators.append(next(tokens))
            branches.append(self.parse_concat(tokens, groups, depth))
        if len(branches) == 1:
            return branches[0]
        for i, branch in enumerate(branches):
            if isinstance(branch, Epsilon):
                separator = separators[max(i - 1, 0)]
                raise self.error(
                    tokens,
                    "empty alternative, expected an expression %s %s" % (
                        "before" if i == 0 else "after", separator.lexeme
                    ),
                    separator.position
                )
        return Alternation(branches)

    def parse_concat(self, tokens, groups, depth):
        result = []
        while True:
            token = tokens.lookahead()
            if token is None or isinstance(token, (Alternate, GroupClose)):
                break
            result.append(self.parse_quantified(tokens, groups, depth))
        if not result:
            return Epsilon()
        elif len(result) == 1:
            return result[0]
        return Concat(result)

    def parse_quantified(self, tokens, groups, depth):
        token = tokens.lookahead()
        if isinstance(token, Quantifier):
            raise self.error(
                tokens,
                "%s is not preceded by a repeatable expression" % token.lexeme,
                token.position
            )
        result = self.parse_atom(tokens, groups, depth)
        if isinstance(tokens.lookahead(), Quantifier):
            quantifier = next(tokens)
            result = Repeat(result, quantifier.minimum, quantifier.maximum)
            token = tokens.lookahead()
            if isinstance(token, Quantifier):
                raise self.error(
                    tokens,
                    "%s cannot follow the repetition %s" % (
                        token.lexeme, quantifier.lexeme
                    ),
                    token.position
                )
        return result

    def parse_atom(self, tokens, groups, depth):
        token = next(tokens)
        if isinstance(token, Character):
            return Literal(token.character)
        elif isinstance(token, AnyCharacter):
            return CharClass(frozenset(), negated=True)
        elif isinstance(token, ClassOpen):
            return self.parse_class(tokens, token)
        elif isinstance(token, GroupOpen):
            return self.parse_group(tokens, groups, token, depth + 1)
        raise self.error(
            tokens, "unexpected %s" % token.lexeme, token.position
        )

    def parse_group(self, tokens, groups, begin, depth):
        if depth > self.max_depth:
            raise self.error(
                tokens,
                "too deeply nested, groups may be nested %d levels deep" % (
                    self.max_depth
                ),
                begin.position
            )
        index = next(groups)
        result = self.parse_alternation(tokens, groups, depth)
        end = tokens.lookahead()
        if not isinstance(end, GroupClose):
            # parse_concat only stops at the end or at a group end
            raise ParseError(
                "unexpected end of string, expected %s corresponding to %s" % (
                    self.language.group_end, begin.lexeme
                ),
                tokens.end,
                tokens.annotated_range(begin.position, tokens.end)
            )
        next(tokens)
        return Group(result, index)

    def parse_class(self, tokens, begin):
        negated = False
        if isinstance(tokens.lookahead(), ClassNegate):
            next(tokens)
            negated = True
        items = set()
        for token in tokens:
            if isinstance(token, ClassClose):
                return CharClass(items, negated)
            elif isinstance(token, ClassRange):
                items.add(Range(token.start, token.end))
            elif isinstance(token, Character):
                items.add(token.character)
            else:
                raise self.error(
                    tokens,
                    "unexpected %s in character class" % token.lexeme,
                    token.position
                )
        raise ParseError(
            "unexpected end of string, expected %s corresponding to %s" % (
                self.language.class_end, begin.lexeme
            ),
            tokens.end,
            tokens.annotated_range(begin.position, tokens.end)
        )

    def format(self, regex):
        """
        Renders `regex` back into a pattern of the parser's language.
        Parentheses are added where the structure of the tree requires them.
        """
        language = self.language
        if isinstance(regex, Epsilon):
            return ""
        elif isinstance(regex, Literal):
            return language.escape_character(regex.character)
        elif isinstance(regex, CharClass):
            if regex.negated and not regex.items:
                return language.any
            members = []
            for item in sorted(regex.items, key=item_sort_key):
                if isinstance(item, Range):
                    members.append("%s%s%s" % (
                        language.escape_character(item.start, in_class=True),
                        language.range,
                        language.escape_character(item.end, in_class=True)
                    ))
                else:
                    members.append(
                        language.escape_character(item, in_class=True)
                    )
            return "%s%s%s%s" % (
                language.class_begin,
                language.negation if regex.negated else "",
                "".join(members),
                language.class_end
            )
        elif isinstance(regex, Concat):
            return "".join(
                self._format_operand(child, Alternation)
                for child in regex.children
            )
        elif isinstance(regex, Alternation):
            return language.union.join(map(self.format, regex.children))
        elif isinstance(regex, Repeat):
            return self._format_operand(
                regex.child, (Concat, Alternation, Repeat, Epsilon)
            ) + self._format_quantifier(regex.minimum, regex.maximum)
        elif isinstance(regex, Group):
            return "%s%s%s" % (
                language.group_begin,
                self.format(regex.child),
                language.group_end
            )
        raise NotImplementedError(regex)

    def _format_operand(self, regex, needs_group):
        if isinstance(regex, needs_group):
            return "%s%s%s" % (
                self.language.group_begin,
                self.format(regex),
                self.language.group_end
            )
        return self.format(regex)

    def _format_quantifier(self, minimum, maximum):
        language = self.language
        if (minimum, maximum) == (0, None):
            return language.zero_or_more
        elif (minimum, maximum) == (1, None):
            return language.one_or_more
        elif (minimum, maximum) == (0, 1):
            return language.zero_or_one
        elif maximum is None:
            bounds = "%d%s" % (minimum, language.count_separator)
        elif minimum == maximum:
            bounds = "%d" % minimum
        else:
            bounds = "%d%s%d" % (minimum, language.count_separator, maximum)
        return "%s%s%s" % (language.count_begin, bounds, language.count_end)


def parse(string, language=DEFAULT_LANGUAGE):
    return Parser(language).parse(tokenize(string, language))
