"""Recursive descent parser for rlisp, one token of lookahead:

```
<expr> ::= <l_open> <expr>* <l_close>   ; List
         | <number>                     ; Number
         | <symbol>                     ; Symbol
```

String literals are tokenized but rejected here, since there is no string value to evaluate them to. An empty token
sequence parses to the empty List, which evaluates to itself and so acts as a no-op.
"""

from rlisp.lang.error import ParseError
from rlisp.pure import lexical
from rlisp.pure.syntax import List, Number, Symbol


def parse_list(tokens, pos):
    """Parses list elements starting after an LOpen at tokens[pos - 1]. Returns (List, pos after the LClose)."""
    elements = []
    while True:
        if pos >= len(tokens):
            raise ParseError("expected list closing")
        elif isinstance(tokens[pos], lexical.LClose):
            return List(elements), pos + 1

        expr, pos = parse_expr(tokens, pos)
        elements.append(expr)


def parse_expr(tokens, pos=0):
    """Parses a single expression starting at tokens[pos]. Returns (Expression, pos after it)."""
    if pos >= len(tokens):
        return List(), pos

    token = tokens[pos]
    if isinstance(token, lexical.LOpen):
        return parse_list(tokens, pos + 1)
    elif isinstance(token, lexical.LClose):
        raise ParseError("unexpected list closing")
    elif isinstance(token, lexical.Number):
        return Number(token.value), pos + 1
    elif isinstance(token, lexical.Symbol):
        return Symbol(token.value), pos + 1
    elif isinstance(token, lexical.StrLit):
        raise ParseError("unsupported token type: string literal {}", repr(token.value))
    raise ParseError("unsupported token type: {}", repr(token))


def parse(tokens):
    """Parses a whole token sequence into exactly one Expression."""
    tokens = list(tokens)
    expr, pos = parse_expr(tokens)
    if pos != len(tokens):
        raise ParseError("failed to parse all of input")
    return expr


def read(source):
    """Tokenizes and parses source."""
    return parse(lexical.tokens(source))
