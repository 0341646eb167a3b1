# coding: utf-8
"""
    rexgraph.tests
    ~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import io
import re
from itertools import product
from unittest import TestCase
from contextlib import contextmanager, redirect_stdout, redirect_stderr

from rexgraph import compile
from rexgraph.tokenizer import (
    tokenize, LexError, Language, DEFAULT_LANGUAGE, Character, Escape,
    AnyCharacter, ClassOpen, ClassClose, ClassNegate, ClassRange, GroupOpen,
    GroupClose, Alternate, Star, Plus, Question, Count
)
from rexgraph.parser import parse, Parser, ParseError, MAX_DEPTH
from rexgraph.ast import (
    Epsilon, Literal, CharClass, Range, Concat, Alternation, Repeat, Group
)
from rexgraph.builder import build, StateGraphBuilder
from rexgraph.graph import State, Transition, CharSet
from rexgraph.__main__ import main


class TestTokenizer(TestCase):
    def test_characters_and_operators(self):
        self.assertEqual(list(tokenize("a*b")), [
            Character("a", 0),
            Star("*", 1),
            Character("b", 2)
        ])
        self.assertEqual(list(tokenize(".|(+?)")), [
            AnyCharacter(".", 0),
            Alternate("|", 1),
            GroupOpen("(", 2),
            Plus("+", 3),
            Question("?", 4),
            GroupClose(")", 5)
        ])

    def test_quantifier_bounds(self):
        star, plus, question = tokenize("*+?")
        self.assertEqual((star.minimum, star.maximum), (0, None))
        self.assertEqual((plus.minimum, plus.maximum), (1, None))
        self.assertEqual((question.minimum, question.maximum), (0, 1))

    def test_escape(self):
        self.assertEqual(list(tokenize("\\*")), [Escape("*", 0, "\\*")])
        self.assertNotEqual(Escape("*", 0, "\\*"), Character("*", 0))

    def test_unmatched_class_and_count_end_are_characters(self):
        self.assertEqual(list(tokenize("]}")), [
            Character("]", 0),
            Character("}", 1)
        ])

    def test_class(self):
        self.assertEqual(list(tokenize("[^a-c\\]]")), [
            ClassOpen("[", 0),
            ClassNegate("^", 1),
            ClassRange("a", "c", 2),
            Escape("]", 5, "\\]"),
            ClassClose("]", 7)
        ])

    def test_class_literal_dashes(self):
        self.assertEqual(list(tokenize("[-a-]")), [
            ClassOpen("[", 0),
            Character("-", 1),
            Character("a", 2),
            Character("-", 3),
            ClassClose("]", 4)
        ])

    def test_class_negation_only_at_start(self):
        self.assertEqual(list(tokenize("[a^]")), [
            ClassOpen("[", 0),
            Character("a", 1),
            Character("^", 2),
            ClassClose("]", 3)
        ])

    def test_count(self):
        self.assertEqual(list(tokenize("a{3}")), [
            Character("a", 0),
            Count(3, 3, "{3}", 1)
        ])
        self.assertEqual(list(tokenize("a{2,}"))[1], Count(2, None, "{2,}", 1))
        count = list(tokenize("a{0,12}"))[1]
        self.assertEqual((count.minimum, count.maximum), (0, 12))

    def test_lazy(self):
        tokens = tokenize("ab\\")
        self.assertEqual(next(tokens), Character("a", 0))
        self.assertEqual(next(tokens), Character("b", 1))
        with self.assertRaises(LexError):
            next(tokens)

    def test_escape_missing_character(self):
        with self.assertRaises(LexError) as context:
            list(tokenize("ab\\"))
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "unexpected end of string, following escape character"
        )
        self.assertEqual(exception.position, 3)
        self.assertEqual(exception.annotation, (
            "ab\\\n"
            "   ^"
        ))

    def test_class_missing_end(self):
        with self.assertRaises(LexError) as context:
            list(tokenize("[ab"))
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "unexpected end of string, expected ] corresponding to ["
        )
        self.assertEqual(exception.annotation, (
            "[ab\n"
            "^--^"
        ))

    def test_range_start_greater_than_end(self):
        with self.assertRaises(LexError) as context:
            list(tokenize("[z-a]"))
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "invalid range z-a, start is greater than end"
        )
        self.assertEqual(exception.position, 1)
        self.assertEqual(exception.annotation, (
            "[z-a]\n"
            " ^-^"
        ))

    def test_count_minimum_greater_than_maximum(self):
        with self.assertRaises(LexError) as context:
            list(tokenize("a{3,1}"))
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "invalid repetition count {3,1}, minimum is greater than maximum"
        )
        self.assertEqual(exception.annotation, (
            "a{3,1}\n"
            " ^---^"
        ))

    def test_malformed_count(self):
        for pattern, annotation in [
            ("a{x}", " ^"),
            ("a{", " ^"),
            ("a{1,2", " ^--^"),
        ]:
            with self.assertRaises(LexError) as context:
                list(tokenize(pattern))
            exception = context.exception
            self.assertEqual(
                exception.reason,
                "malformed repetition count, expected {m}, {m,} or {m,n}"
            )
            self.assertEqual(exception.position, 1)
            self.assertEqual(
                exception.annotation, "%s\n%s" % (pattern, annotation)
            )

    def test_error_string(self):
        with self.assertRaises(LexError) as context:
            list(tokenize("[ab"))
        self.assertEqual(str(context.exception), (
            "unexpected end of string, expected ] corresponding to [\n"
            "[ab\n"
            "^--^"
        ))


class TestParser(TestCase):
    def test_epsilon(self):
        self.assertEqual(parse(""), Epsilon())

    def test_literal(self):
        self.assertEqual(parse("a"), Literal("a"))
        self.assertEqual(parse("\\("), Literal("("))

    def test_concat(self):
        self.assertEqual(
            parse("abc"),
            Concat([Literal("a"), Literal("b"), Literal("c")])
        )

    def test_alternation(self):
        self.assertEqual(
            parse("a|bc|d"),
            Alternation([
                Literal("a"),
                Concat([Literal("b"), Literal("c")]),
                Literal("d")
            ])
        )

    def test_quantifier_binds_to_atom(self):
        self.assertEqual(
            parse("ab*"),
            Concat([Literal("a"), Repeat(Literal("b"), 0, None)])
        )

    def test_quantifiers(self):
        self.assertEqual(parse("a*"), Repeat(Literal("a"), 0, None))
        self.assertEqual(parse("a+"), Repeat(Literal("a"), 1, None))
        self.assertEqual(parse("a?"), Repeat(Literal("a"), 0, 1))
        self.assertEqual(parse("a{2,3}"), Repeat(Literal("a"), 2, 3))
        self.assertEqual(parse("a{2,}"), Repeat(Literal("a"), 2, None))

    def test_group(self):
        self.assertEqual(parse("(a)"), Group(Literal("a"), 1))
        self.assertEqual(parse("()"), Group(Epsilon(), 1))
        self.assertEqual(
            parse("(ab)*"),
            Repeat(Group(Concat([Literal("a"), Literal("b")]), 1), 0, None)
        )

    def test_group_indices(self):
        self.assertEqual(
            parse("((a)(b))|(c)"),
            Alternation([
                Group(Concat([
                    Group(Literal("a"), 2),
                    Group(Literal("b"), 3)
                ]), 1),
                Group(Literal("c"), 4)
            ])
        )

    def test_char_class(self):
        self.assertEqual(
            parse("[a-cx]"),
            CharClass(frozenset([Range("a", "c"), "x"]))
        )
        self.assertEqual(
            parse("[^xyz]"),
            CharClass(frozenset("xyz"), negated=True)
        )

    def test_any(self):
        self.assertEqual(parse("."), CharClass(frozenset(), negated=True))

    def test_mixed(self):
        self.assertEqual(
            parse("a*b[^xyz]?(12|24|48)"),
            Concat([
                Repeat(Literal("a"), 0, None),
                Literal("b"),
                Repeat(CharClass(frozenset("xyz"), True), 0, 1),
                Group(Alternation([
                    Concat([Literal("1"), Literal("2")]),
                    Concat([Literal("2"), Literal("4")]),
                    Concat([Literal("4"), Literal("8")])
                ]), 1)
            ])
        )

    def test_quantifier_missing_repeatable(self):
        for pattern, annotation in [
            ("*", "^"),
            ("a|+", "  ^"),
            ("(?)", " ^"),
        ]:
            with self.assertRaises(ParseError) as context:
                parse(pattern)
            exception = context.exception
            self.assertEqual(
                exception.reason,
                "%s is not preceded by a repeatable expression" % (
                    pattern[len(annotation) - 1]
                )
            )
            self.assertEqual(
                exception.annotation, "%s\n%s" % (pattern, annotation)
            )

    def test_repeated_quantifier(self):
        with self.assertRaises(ParseError) as context:
            parse("a**")
        exception = context.exception
        self.assertEqual(exception.reason, "* cannot follow the repetition *")
        self.assertEqual(exception.annotation, (
            "a**\n"
            "  ^"
        ))
        with self.assertRaises(ParseError) as context:
            parse("a+?")
        self.assertEqual(
            context.exception.reason, "? cannot follow the repetition +"
        )
        with self.assertRaises(ParseError) as context:
            parse("a{2}*")
        self.assertEqual(
            context.exception.reason, "* cannot follow the repetition {2}"
        )

    def test_group_missing_end(self):
        with self.assertRaises(ParseError) as context:
            parse("(ab")
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "unexpected end of string, expected ) corresponding to ("
        )
        self.assertEqual(exception.annotation, (
            "(ab\n"
            "^--^"
        ))

    def test_group_missing_begin(self):
        with self.assertRaises(ParseError) as context:
            parse("a)")
        exception = context.exception
        self.assertEqual(exception.reason, "found unmatched )")
        self.assertEqual(exception.position, 1)
        self.assertEqual(exception.annotation, (
            "a)\n"
            " ^"
        ))

    def test_empty_alternative(self):
        for pattern, reason, annotation in [
            ("a|", "after", " ^"),
            ("|a", "before", "^"),
            ("a||b", "after", " ^"),
            ("(a|)b", "after", "  ^"),
        ]:
            with self.assertRaises(ParseError) as context:
                parse(pattern)
            exception = context.exception
            self.assertEqual(
                exception.reason,
                "empty alternative, expected an expression %s |" % reason
            )
            self.assertEqual(
                exception.annotation, "%s\n%s" % (pattern, annotation)
            )

    def test_lex_errors_pass_through(self):
        with self.assertRaises(LexError):
            parse("a[b")

    def test_parse_token_list(self):
        parser = Parser()
        self.assertEqual(
            parser.parse([Character("a", 0), Star("*", 1)]),
            Repeat(Literal("a"), 0, None)
        )
        with self.assertRaises(ParseError) as context:
            parser.parse([Star("*", 0)])
        self.assertEqual(context.exception.position, 0)
        self.assertIsNone(context.exception.annotation)

    def test_parse_token_list_class_missing_end(self):
        with self.assertRaises(ParseError) as context:
            Parser().parse([ClassOpen("[", 0), Character("a", 1)])
        self.assertEqual(
            context.exception.reason,
            "unexpected end of string, expected ] corresponding to ["
        )

    def test_parse_token_list_misplaced_class_token(self):
        with self.assertRaises(ParseError) as context:
            Parser().parse([ClassNegate("^", 0)])
        self.assertEqual(context.exception.reason, "unexpected ^")

    def test_language(self):
        language = Language(zero_or_more="~")
        self.assertEqual(
            parse("a~*", language),
            Concat([Repeat(Literal("a"), 0, None), Literal("*")])
        )

    def test_nesting_depth(self):
        pattern = "(" * MAX_DEPTH + "a" + ")" * MAX_DEPTH
        self.assertTrue(accepts(compile(pattern), "a"))
        graph = compile("(" * MAX_DEPTH + "a" + ")*" * MAX_DEPTH)
        self.assertTrue(accepts(graph, ""))
        self.assertTrue(accepts(graph, "aaa"))

    def test_nesting_too_deep(self):
        for depth in [MAX_DEPTH + 1, 1000]:
            with self.assertRaises(ParseError) as context:
                compile("(" * depth + "a" + ")" * depth)
            exception = context.exception
            self.assertEqual(
                exception.reason,
                "too deeply nested, groups may be nested %d levels deep" % (
                    MAX_DEPTH
                )
            )
            self.assertEqual(exception.position, MAX_DEPTH)

    def test_max_depth(self):
        with self.assertRaises(ParseError) as context:
            Parser(max_depth=2).parse(tokenize("((a)(((b))))"))
        self.assertEqual(context.exception.annotation, (
            "((a)(((b))))\n"
            "     ^"
        ))
        self.assertEqual(
            Parser(max_depth=2).parse(tokenize("((a)(b))")),
            parse("((a)(b))")
        )


class TestLanguage(TestCase):
    def test_escape(self):
        self.assertEqual(DEFAULT_LANGUAGE.escape("a*b"), "a\\*b")
        self.assertEqual(DEFAULT_LANGUAGE.escape("(x|y)"), "\\(x\\|y\\)")

    def test_equality(self):
        self.assertEqual(Language(), DEFAULT_LANGUAGE)
        self.assertNotEqual(Language(any="_"), DEFAULT_LANGUAGE)

    def test_format_round_trip(self):
        for pattern in [
            "",
            "a*b[^xyz]?(12|24|48)",
            "(ab)+c{2,}",
            "x{3}y{1,4}",
            "[\\]a-c]",
            ".",
            "a\\|b",
            "()",
        ]:
            self.assertEqual(Parser().format(parse(pattern)), pattern)

    def test_format_adds_groups(self):
        self.assertEqual(
            Parser().format(
                Repeat(Concat([Literal("a"), Literal("b")]), 0, None)
            ),
            "(ab)*"
        )
        self.assertEqual(
            Parser().format(
                Concat([
                    Literal("a"),
                    Alternation([Literal("b"), Literal("c")])
                ])
            ),
            "a(b|c)"
        )

    def test_format_language(self):
        parser = Parser(Language(zero_or_more="~", union="!"))
        pattern = "(a!\\~)~|*"
        self.assertEqual(
            parser.format(parse(pattern, parser.language)), pattern
        )


def accepts(graph, string):
    states = graph.epsilon_closure(graph.start)
    for character in string:
        states = graph.epsilon_closure(graph.move(states, character))
        if not states:
            return False
    return any(graph.is_accepting(state) for state in states)


class RegexTestWrapper(object):
    def __init__(self, test_case, regex):
        self.test_case = test_case
        self.regex = regex
        self.graph = compile(regex)

    def assertAccepts(self, string):
        self.test_case.assertTrue(
            accepts(self.graph, string),
            "%r does not accept %r" % (self.regex, string)
        )

    def assertAcceptsAll(self, strings):
        for string in strings:
            self.assertAccepts(string)

    def assertRejects(self, string):
        self.test_case.assertFalse(
            accepts(self.graph, string),
            "%r accepts %r" % (self.regex, string)
        )

    def assertRejectsAll(self, strings):
        for string in strings:
            self.assertRejects(string)


class TestStateGraphBuilder(TestCase):
    def test_literal(self):
        graph = build(Literal("a"))
        self.assertEqual(dict(graph.states), {
            0: State(0, False),
            1: State(1, True)
        })
        self.assertEqual(graph.transitions, (Transition(0, 1, CharSet("a")),))
        self.assertEqual(graph.start, 0)
        self.assertEqual(graph.accept, frozenset([1]))

    def test_epsilon(self):
        graph = build(Epsilon())
        self.assertEqual(dict(graph.states), {0: State(0, True)})
        self.assertEqual(graph.transitions, ())
        self.assertEqual(graph.start, 0)
        self.assertEqual(graph.accept, frozenset([0]))

    def test_char_class(self):
        graph = build(CharClass(frozenset("xyz"), negated=True))
        self.assertEqual(
            graph.transitions,
            (Transition(0, 1, CharSet("xyz", negated=True)),)
        )

    def test_concat(self):
        graph = compile("ab")
        self.assertEqual(graph.transitions, (
            Transition(0, 1, CharSet("a")),
            Transition(2, 3, CharSet("b")),
            Transition(1, 2, None)
        ))
        self.assertEqual((graph.start, graph.accept), (0, frozenset([3])))

    def test_alternation(self):
        graph = compile("a|b")
        self.assertEqual(graph.transitions, (
            Transition(0, 1, CharSet("a")),
            Transition(2, 3, CharSet("b")),
            Transition(4, 0, None),
            Transition(1, 5, None),
            Transition(4, 2, None),
            Transition(3, 5, None)
        ))
        self.assertEqual((graph.start, graph.accept), (4, frozenset([5])))

    def test_zero_or_more(self):
        graph = compile("a*")
        self.assertEqual(graph.transitions, (
            Transition(0, 1, CharSet("a")),
            Transition(2, 0, None),
            Transition(1, 2, None),
            Transition(2, 3, None)
        ))
        self.assertEqual((graph.start, graph.accept), (2, frozenset([3])))

    def test_zero_or_one(self):
        graph = compile("a?")
        self.assertEqual(graph.transitions, (
            Transition(0, 1, CharSet("a")),
            Transition(2, 0, None),
            Transition(1, 3, None),
            Transition(2, 3, None)
        ))
        self.assertEqual((graph.start, graph.accept), (2, frozenset([3])))

    def test_one_or_more(self):
        graph = compile("a+")
        self.assertEqual(graph.transitions, (
            Transition(0, 1, CharSet("a")),
            Transition(2, 3, CharSet("a")),
            Transition(4, 2, None),
            Transition(3, 4, None),
            Transition(4, 5, None),
            Transition(1, 4, None)
        ))
        self.assertEqual((graph.start, graph.accept), (0, frozenset([5])))

    def test_bounded_repeat(self):
        self.assertEqual(len(compile("a{2,4}")), 12)
        self.assertEqual(len(compile("a{3}")), 6)
        graph = compile("a{0}")
        self.assertEqual(len(graph), 1)
        self.assertEqual(graph.accept, frozenset([graph.start]))

    def test_group_is_transparent(self):
        grouped = compile("(a)")
        plain = compile("a")
        self.assertEqual(dict(grouped.states), dict(plain.states))
        self.assertEqual(grouped.transitions, plain.transitions)

    def test_deterministic(self):
        pattern = "a*b[^xyz]?(12|24|48)"
        self.assertEqual(repr(compile(pattern)), repr(compile(pattern)))
        builder = StateGraphBuilder()
        regex = parse(pattern)
        self.assertEqual(
            repr(builder.build(regex)), repr(builder.build(regex))
        )

    def test_to_graph(self):
        regex = parse("ab|c")
        self.assertEqual(repr(regex.to_graph()), repr(build(regex)))

    def test_structural_invariants(self):
        for pattern in [
            "", "a", "ab", "a|b", "a*", "a+", "a?", "()", "()*", "(a|b)*c",
            "a*b[^xyz]?(12|24|48)", "((a*)*)*", "a{2,}", "a{0,3}", "[]", ".+",
        ]:
            graph = compile(pattern)
            self.assertIn(graph.start, graph.states)
            self.assertEqual(len(graph.accept), 1)
            for state_id in graph.accept:
                self.assertIn(state_id, graph.states)
                self.assertTrue(graph.is_accepting(state_id))
            for state in graph.states.values():
                self.assertEqual(state.accepting, state.id in graph.accept)
            for transition in graph.transitions:
                self.assertIn(transition.source, graph.states)
                self.assertIn(transition.target, graph.states)
            self.assertEqual(graph.reachable(), frozenset(graph.states))


class TestStateGraph(TestCase):
    def test_epsilon_closure(self):
        graph = compile("a*")
        self.assertEqual(graph.epsilon_closure(2), frozenset([0, 2, 3]))
        self.assertEqual(graph.epsilon_closure([1]), frozenset([0, 1, 2, 3]))
        self.assertEqual(graph.epsilon_closure([]), frozenset())

    def test_transitions_from(self):
        graph = compile("a*")
        self.assertEqual(graph.transitions_from(2), (
            Transition(2, 0, None),
            Transition(2, 3, None)
        ))
        self.assertEqual(graph.transitions_from(3), ())

    def test_move(self):
        graph = compile("a*")
        self.assertEqual(graph.move(0, "a"), frozenset([1]))
        self.assertEqual(graph.move([0, 2], "a"), frozenset([1]))
        self.assertEqual(graph.move(2, "a"), frozenset())
        self.assertEqual(graph.move(0, "b"), frozenset())

    def test_charset(self):
        self.assertIn("b", CharSet([Range("a", "c")]))
        self.assertNotIn("d", CharSet([Range("a", "c"), "x"]))
        self.assertIn("x", CharSet([Range("a", "c"), "x"]))
        self.assertNotIn("x", CharSet("xyz", negated=True))
        self.assertIn("q", CharSet("xyz", negated=True))
        self.assertIn("q", CharSet([], negated=True))
        self.assertNotIn("q", CharSet([]))

    def test_charset_str(self):
        self.assertEqual(str(CharSet("a")), "a")
        self.assertEqual(str(CharSet([], negated=True)), ".")
        self.assertEqual(str(CharSet("zyx", negated=True)), "[^xyz]")
        self.assertEqual(str(CharSet([Range("a", "c"), "_"])), "[_a-c]")

    def test_charset_str_escapes_class_characters(self):
        self.assertEqual(str(CharSet("]a")), "[\\]a]")
        self.assertEqual(
            str(CharSet([Range("^", "a"), "-"], negated=True)),
            "[^\\-\\^-a]"
        )
        self.assertIn('[label="[\\\\]a]"]', compile("[\\]a]").to_dot())

    def test_to_dot(self):
        self.assertEqual(compile("a").to_dot(), (
            'digraph {\n'
            '\trankdir=LR\n'
            '\tS0 [label="0", color="blue"]\n'
            '\tS1 [label="1", shape="doublecircle", color="green"]\n'
            '\tS0 -> S1 [label="a"]\n'
            '}'
        ))

    def test_to_dot_epsilon_and_escaping(self):
        dot = compile('\\"?').to_dot()
        self.assertIn('\tS0 -> S1 [label="\\""]', dot)
        self.assertIn('\tS2 -> S0 [label="ε"]', dot)


class TestAcceptance(TestCase):
    @contextmanager
    def regex(self, regex):
        yield RegexTestWrapper(self, regex)

    def test_empty(self):
        with self.regex("") as regex:
            regex.assertAccepts("")
            regex.assertRejectsAll(["a", "abc"])

    def test_group(self):
        for pattern in ["a(a)a", "aa(a)", "(aa)a"]:
            with self.regex(pattern) as regex:
                regex.assertAccepts("aaa")
                regex.assertRejectsAll(["aa", "aaaa"])

    def test_zero_or_more(self):
        with self.regex("(aaa)*") as regex:
            regex.assertAcceptsAll(["", "aaa", "aaaaaa"])
            regex.assertRejectsAll(["a", "aa", "aaaa"])

    def test_one_or_more(self):
        with self.regex("(aaa)+") as regex:
            regex.assertAcceptsAll(["aaa", "aaaaaaaaa"])
            regex.assertRejectsAll(["", "aa", "aab"])

    def test_zero_or_one(self):
        with self.regex("(aaa)?") as regex:
            regex.assertAcceptsAll(["", "aaa"])
            regex.assertRejectsAll(["a", "aa", "aab"])

    def test_complex(self):
        with self.regex("cc?|cc") as regex:
            regex.assertAccepts("c")
        with self.regex("a*(bb|cc?|(aaa|cd+c|d+))?") as regex:
            regex.assertAcceptsAll(["", "aaa", "ac", "acc", "acdddddc"])
            regex.assertRejectsAll(["ab", "acdd"])

    def test_any(self):
        with self.regex("a.c") as regex:
            regex.assertAcceptsAll(["abc", "a.c", "a c"])
            regex.assertRejectsAll(["ac", "abbc"])

    def test_star_then_literal(self):
        with self.regex("a*b") as regex:
            regex.assertAcceptsAll(["b", "ab", "aaab"])
            regex.assertRejectsAll(["a", "", "ba"])

    def test_optional_negated_class(self):
        with self.regex("[^xyz]?") as regex:
            regex.assertAcceptsAll(["", "q", "5"])
            regex.assertRejectsAll(["x", "y", "z", "ab"])

    def test_grouped_alternation(self):
        with self.regex("(12|24|48)") as regex:
            regex.assertAcceptsAll(["12", "24", "48"])
            regex.assertRejectsAll(["13", "1", "124"])

    def test_combined(self):
        with self.regex("a*b[^xyz]?(12|24|48)") as regex:
            regex.assertAcceptsAll(["b48", "aabA12", "ab24", "aab112", "bq12"])
            regex.assertRejectsAll(["aabxy12", "aabx12", "aab", "aabqq12"])

    def test_bounded_repeat(self):
        with self.regex("a{2,3}") as regex:
            regex.assertAcceptsAll(["aa", "aaa"])
            regex.assertRejectsAll(["", "a", "aaaa"])
        with self.regex("(ab){2,}") as regex:
            regex.assertAcceptsAll(["abab", "ababab"])
            regex.assertRejectsAll(["ab", "aba"])


def strings(alphabet, max_length):
    for length in range(max_length + 1):
        for characters in product(alphabet, repeat=length):
            yield "".join(characters)


class TestLanguageProperties(TestCase):
    patterns = [
        "", "()", "a", "a*b", "(ab|b)*", "a?b+", "[ab]{1,2}", "a(b|a)*b?",
        "[^a]*a", "((a|b)c)+", "a{2,}b{0,1}", "c|a.b", "[a-b]c?",
    ]

    def test_same_language_as_re(self):
        for pattern in self.patterns:
            graph = compile(pattern)
            expected = re.compile(pattern)
            for string in strings("abc", 4):
                self.assertEqual(
                    accepts(graph, string),
                    expected.fullmatch(string) is not None,
                    "%r on %r" % (pattern, string)
                )

    def test_concatenation(self):
        for first, second in product(self.patterns[2:7], repeat=2):
            graph = compile("(%s)(%s)" % (first, second))
            first_graph, second_graph = compile(first), compile(second)
            for string in strings("abc", 4):
                self.assertEqual(
                    accepts(graph, string),
                    any(
                        accepts(first_graph, string[:i]) and
                        accepts(second_graph, string[i:])
                        for i in range(len(string) + 1)
                    )
                )

    def test_alternation(self):
        for first, second in product(self.patterns[2:7], repeat=2):
            graph = compile("(%s)|(%s)" % (first, second))
            first_graph, second_graph = compile(first), compile(second)
            for string in strings("abc", 4):
                self.assertEqual(
                    accepts(graph, string),
                    accepts(first_graph, string) or
                    accepts(second_graph, string)
                )

    def test_zero_or_more(self):
        for pattern in self.patterns[2:7]:
            graph = compile("(%s)*" % pattern)
            repeated = compile(pattern)
            for string in strings("abc", 4):
                # splittable[i]: string[:i] is a concatenation of words
                splittable = [True] + [False] * len(string)
                for end in range(1, len(string) + 1):
                    splittable[end] = any(
                        splittable[start] and
                        accepts(repeated, string[start:end])
                        for start in range(end)
                    )
                self.assertEqual(accepts(graph, string), splittable[-1])


class TestCommandLine(TestCase):
    def run_main(self, *arguments):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(["rexgraph"] + list(arguments))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_tree(self):
        status, stdout, stderr = self.run_main("tree", "ab")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "Concat([Literal('a'), Literal('b')])\n")

    def test_graph(self):
        status, stdout, stderr = self.run_main("graph", "a")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, compile("a").to_dot() + "\n")

    def test_error(self):
        status, stdout, stderr = self.run_main("graph", "(ab")
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "")
        self.assertEqual(stderr, (
            "ParseError: "
            "unexpected end of string, expected ) corresponding to (\n"
            "(ab\n"
            "^--^\n"
        ))

    def test_lex_error(self):
        status, stdout, stderr = self.run_main("tree", "[z-a]")
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "")
        self.assertEqual(stderr, (
            "LexError: invalid range z-a, start is greater than end\n"
            "[z-a]\n"
            " ^-^\n"
        ))
