"""Lexical analysis for rlisp: converts raw source text into a flat sequence of tokens.

Token grammar, loosely:

```
<l_open>   ::= "("
<l_close>  ::= ")"
<str_lit>  ::= '"' (<char> | "\\" <char>)* '"'     ; or the same with "'" as the quote character
<number>   ::= ["+" | "-"] <digit>+ ["." <digit>*]   ; <digit> is ASCII 0-9, always read as a finite float
<symbol>   ::= <char>+                               ; up to whitespace, "(", ")", '"' or "'"
```

Tokens carry no position information, so lexical errors are content-only.
"""

import math
import re

from rlisp.lang.error import LexError


class Token:
    """Superclass for all tokens. Tokens are immutable and compare by type and value."""
    __slots__ = ()

    @property
    def value(self):
        return None

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        if self.value is None:
            return type(self).__name__
        return f"{type(self).__name__}({self.value!r})"


class ValueToken(Token):
    """Token that owns a value (string literal, symbol name or number)."""
    __slots__ = ("_value",)

    def __init__(self, value):
        object.__setattr__(self, "_value", value)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")


class EOF(Token):
    """End of input. Terminates tokenization and is never part of tokenize's output."""
    __slots__ = ()


class LOpen(Token):
    __slots__ = ()


class LClose(Token):
    __slots__ = ()


class StrLit(ValueToken):
    """String literal. value is the decoded string, with escape sequences resolved."""
    __slots__ = ()


class Symbol(ValueToken):
    __slots__ = ()


class Number(ValueToken):
    __slots__ = ()

    def __init__(self, value):
        super().__init__(float(value))


DIGITS = "0123456789"
QUOTES = ("\"", "'")
DELIMITERS = ("(", ")") + QUOTES
ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

NUMBER = re.compile(r"[+\-]?[0-9]+(?:\.[0-9]*)?")
WHITESPACE = re.compile(r"\s*")


def skip_whitespace(source, pos):
    """Returns index of first non-whitespace character at or after pos."""
    return WHITESPACE.match(source, pos).end()


def is_number_start(source, pos):
    """Whether a number literal starts at pos: a digit, or a sign immediately followed by a digit."""
    char = source[pos]
    if char in DIGITS:
        return True
    return char in "+-" and pos + 1 < len(source) and source[pos + 1] in DIGITS


def get_token(source, pos):
    """Reads a single token starting at pos (which must not be whitespace). Returns (token, pos after token)."""
    if pos >= len(source):
        return EOF(), pos

    char = source[pos]
    if char == "(":
        return LOpen(), pos + 1
    elif char == ")":
        return LClose(), pos + 1
    elif char in QUOTES:
        return get_string(source, pos)
    elif is_number_start(source, pos):
        return get_number(source, pos)
    return get_symbol(source, pos)


def get_string(source, pos):
    """Reads a string literal closed by the same quote character that opened it."""
    ending_char = source[pos]
    chars = []

    idx = pos + 1
    while idx < len(source):
        char = source[idx]
        if char == ending_char:
            return StrLit("".join(chars)), idx + 1
        elif char == "\\":
            if idx + 1 >= len(source):
                raise LexError("unterminated escape sequence in {}", source[pos:])
            escaped = source[idx + 1]
            chars.append(ESCAPES.get(escaped, escaped))
            idx += 2
        else:
            chars.append(char)
            idx += 1

    raise LexError("unterminated string literal {}", source[pos:])


def get_number(source, pos):
    """Reads the longest numeric literal at pos. Any trailing non-numeric characters start the next token."""
    match = NUMBER.match(source, pos)
    token = Number(match.group())
    if not math.isfinite(token.value):
        raise LexError("number literal out of range: {}", match.group())
    return token, match.end()


def get_symbol(source, pos):
    """Reads characters until the end of the identifier."""
    end = pos
    while end < len(source) and not source[end].isspace() and source[end] not in DELIMITERS:
        end += 1
    return Symbol(source[pos:end]), end


def tokens(source):
    """Lazily yields tokens from source. The EOF token ends the stream and is not yielded."""
    pos = 0
    while True:
        token, pos = get_token(source, skip_whitespace(source, pos))
        if isinstance(token, EOF):
            return
        yield token


def tokenize(source):
    """Returns list of all tokens in source. Raises LexError on malformed string literals."""
    return list(tokens(source))
