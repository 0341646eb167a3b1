# coding: utf-8
"""
    rexgraph.tokenizer
    ~~~~~~~~~~~~~~~~~~

    Turns a pattern into a lazy stream of tokens. The characters which have a
    special meaning are defined by a :class:`Language`.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from collections import deque


class RegexException(Exception):
    def __init__(self, reason, position=None, annotation=None):
        Exception.__init__(self, reason, position, annotation)
        self.reason = reason
        self.position = position
        self.annotation = annotation

    def __str__(self):
        if self.annotation is None:
            return self.reason
        return "%s\n%s" % (self.reason, self.annotation)


class LexError(RegexException):
    pass


def annotate(string, position):
    """
    Returns `string` followed by a line pointing at `position`, which may be
    ``len(string)`` to point just past the end.
    """
    annotation = [" "] * (position + 1)
    annotation[position] = "^"
    return "%s\n%s" % (string, "".join(annotation))


def annotate_range(string, start, end):
    annotation = [" "] * (end + 1)
    annotation[start] = annotation[end] = "^"
    for position in range(start + 1, end):
        annotation[position] = "-"
    return "%s\n%s" % (string, "".join(annotation))


class Language(object):
    def __init__(self,
                 escape="\\",
                 union="|",
                 group_begin="(", group_end=")",
                 class_begin="[", class_end="]",
                 negation="^",
                 range="-",
                 any=".",
                 zero_or_more="*", one_or_more="+", zero_or_one="?",
                 count_begin="{", count_end="}", count_separator=","
                 ):
        self.escape_indicator = escape
        self.union = union
        self.group_begin = group_begin
        self.group_end = group_end
        self.class_begin = class_begin
        self.class_end = class_end
        self.negation = negation
        self.range = range
        self.any = any
        self.zero_or_more = zero_or_more
        self.one_or_more = one_or_more
        self.zero_or_one = zero_or_one
        self.count_begin = count_begin
        self.count_end = count_end
        self.count_separator = count_separator

    def _key(self):
        return (
            self.escape_indicator, self.union,
            self.group_begin, self.group_end,
            self.class_begin, self.class_end,
            self.negation, self.range, self.any,
            self.zero_or_more, self.one_or_more, self.zero_or_one,
            self.count_begin, self.count_end, self.count_separator
        )

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, self.__class__):
            return self._key() == other._key()
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._key())

    @property
    def special_characters(self):
        return frozenset([
            self.escape_indicator,
            self.union,
            self.group_begin, self.group_end,
            self.class_begin, self.class_end,
            self.any,
            self.zero_or_more, self.one_or_more, self.zero_or_one,
            self.count_begin
        ])

    @property
    def class_special_characters(self):
        return frozenset([
            self.escape_indicator, self.class_end, self.negation, self.range
        ])

    def escape_character(self, character, in_class=False):
        if in_class:
            special = self.class_special_characters
        else:
            special = self.special_characters
        if character in special:
            return self.escape_indicator + character
        return character

    def escape(self, string):
        return "".join(map(self.escape_character, string))


DEFAULT_LANGUAGE = Language()

DIGITS = "0123456789"


class Input(object):
    def __init__(self, string):
        self.string = string
        self.characters = iter(self.string)
        self.remaining = deque()
        self.position = -1

    def __iter__(self):
        return self

    def __next__(self):
        if self.remaining:
            character = self.remaining.popleft()
        else:
            character = next(self.characters)
        self.position += 1
        return character

    def next(self, reason="unexpected end of string"):
        """
        Like :func:`next` but raises a :exc:`LexError` with `reason` at the
        end of the string.
        """
        try:
            return next(self)
        except StopIteration:
            raise LexError(
                reason,
                self.position + 1,
                annotate(self.string, self.position + 1)
            )

    def lookahead(self, n=1):
        """
        Returns the `n`-th character ahead or `None` if the string ends
        before that.
        """
        while len(self.remaining) < n:
            try:
                self.remaining.append(next(self.characters))
            except StopIteration:
                return None
        return self.remaining[n - 1]

    def consume(self, n=1):
        for _ in range(n):
            next(self)


class Token(object):
    def __init__(self, lexeme, position):
        self.lexeme = lexeme
        self.position = position

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.lexeme == other.lexeme and
                self.position == other.position
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.lexeme) ^ hash(self.position)

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__, self.lexeme, self.position
        )


class Character(Token):
    def __init__(self, character, position, lexeme=None):
        Token.__init__(
            self, character if lexeme is None else lexeme, position
        )
        self.character = character

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.character == other.character and
                Token.__eq__(self, other)
            )
        return NotImplemented

    __hash__ = Token.__hash__


class Escape(Character):
    pass


class AnyCharacter(Token):
    pass


class ClassOpen(Token):
    pass


class ClassClose(Token):
    pass


class ClassNegate(Token):
    pass


class ClassRange(Token):
    def __init__(self, start, end, position, lexeme=None):
        if lexeme is None:
            lexeme = "%s-%s" % (start, end)
        Token.__init__(self, lexeme, position)
        self.start = start
        self.end = end

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.start == other.start and
                self.end == other.end and
                Token.__eq__(self, other)
            )
        return NotImplemented

    __hash__ = Token.__hash__


class GroupOpen(Token):
    pass


class GroupClose(Token):
    pass


class Alternate(Token):
    pass


class Quantifier(Token):
    minimum = None
    maximum = None


class Star(Quantifier):
    minimum = 0


class Plus(Quantifier):
    minimum = 1


class Question(Quantifier):
    minimum = 0
    maximum = 1


class Count(Quantifier):
    def __init__(self, minimum, maximum, lexeme, position):
        Quantifier.__init__(self, lexeme, position)
        self.minimum = minimum
        self.maximum = maximum


class TokenStream(object):
    """
    Forward-only iterator over tokens with a single token of lookahead.
    `string` is the tokenized pattern, if known, and used to annotate errors.
    """

    def __init__(self, tokens, string=None):
        self.tokens = iter(tokens)
        self.string = string
        self.buffered = deque()
        self.end = None if string is None else len(string)

    def __iter__(self):
        return self

    def __next__(self):
        if self.buffered:
            return self.buffered.popleft()
        return next(self.tokens)

    def lookahead(self):
        if not self.buffered:
            try:
                self.buffered.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffered[0]

    def annotated(self, position):
        if self.string is None or position is None:
            return None
        return annotate(self.string, position)

    def annotated_range(self, start, end):
        if self.string is None:
            return None
        return annotate_range(self.string, start, end)


def tokenize(string, language=DEFAULT_LANGUAGE):
    """
    Returns a :class:`TokenStream` over the tokens of `string`. Tokens are
    produced lazily, a :exc:`LexError` is raised once the scan reaches the
    malformed part of the pattern.
    """
    return TokenStream(_scan(Input(string), language), string)


def _scan(input, language):
    simple_tokens = {
        language.any: AnyCharacter,
        language.group_begin: GroupOpen,
        language.group_end: GroupClose,
        language.union: Alternate,
        language.zero_or_more: Star,
        language.one_or_more: Plus,
        language.zero_or_one: Question,
    }
    for character in input:
        position = input.position
        if character == language.escape_indicator:
            yield Escape(
                _escaped(input),
                position,
                input.string[position:input.position + 1]
            )
        elif character == language.class_begin:
            for token in _scan_class(input, language):
                yield token
        elif character == language.count_begin:
            yield _scan_count(input, language)
        elif character in simple_tokens:
            yield simple_tokens[character](character, position)
        else:
            yield Character(character, position)


def _escaped(input):
    return input.next(
        reason="unexpected end of string, following escape character"
    )


def _scan_class(input, language):
    start = input.position
    yield ClassOpen(language.class_begin, start)
    if input.lookahead() == language.negation:
        input.consume()
        yield ClassNegate(language.negation, input.position)
    while True:
        try:
            character = next(input)
        except StopIteration:
            end = len(input.string)
            raise LexError(
                "unexpected end of string, expected %s corresponding to %s" % (
                    language.class_end, language.class_begin
                ),
                end,
                annotate_range(input.string, start, end)
            )
        position = input.position
        if character == language.class_end:
            yield ClassClose(character, position)
            return
        token_cls = Character
        if character == language.escape_indicator:
            character = _escaped(input)
            token_cls = Escape
        following = input.lookahead(2)
        if (input.lookahead() == language.range and
                following is not None and following != language.class_end):
            input.consume()
            end = next(input)
            if end == language.escape_indicator:
                end = _escaped(input)
            lexeme = input.string[position:input.position + 1]
            if character > end:
                raise LexError(
                    "invalid range %s, start is greater than end" % lexeme,
                    position,
                    annotate_range(input.string, position, input.position)
                )
            yield ClassRange(character, end, position, lexeme)
        else:
            yield token_cls(
                character, position, input.string[position:input.position + 1]
            )


def _scan_count(input, language):
    start = input.position

    def malformed():
        end = min(input.position, len(input.string) - 1)
        forms = [
            "m",
            "m" + language.count_separator,
            "m" + language.count_separator + "n"
        ]
        forms = [language.count_begin + form + language.count_end
                 for form in forms]
        return LexError(
            "malformed repetition count, expected %s, %s or %s" % tuple(forms),
            start,
            annotate_range(input.string, start, max(end, start))
        )

    def number():
        digits = []
        while input.lookahead() is not None and input.lookahead() in DIGITS:
            digits.append(next(input))
        if not digits:
            return None
        return int("".join(digits))

    minimum = number()
    if minimum is None:
        raise malformed()
    maximum = minimum
    if input.lookahead() == language.count_separator:
        input.consume()
        maximum = number()
    if input.lookahead() != language.count_end:
        raise malformed()
    input.consume()
    lexeme = input.string[start:input.position + 1]
    if maximum is not None and minimum > maximum:
        raise LexError(
            "invalid repetition count %s, minimum is greater than maximum" % (
                lexeme
            ),
            start,
            annotate_range(input.string, start, input.position)
        )
    return Count(minimum, maximum, lexeme, start)
