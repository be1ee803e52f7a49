"""rlisp: a tree-walking interpreter for a minimal S-expression language.

Basic program flow, once per line:
    1. Lexical analysis: source text is split into tokens (see rlisp/pure/lexical.py)
    2. Parsing: tokens are built into a syntax tree of Symbols, Numbers and Lists (see rlisp/pure/parser.py)
    3. Evaluation: the tree is walked against a chain of scopes holding the builtin procedures and any lambda
       arguments (see rlisp/lang/evaluator.py)

The `pure` directory contains the language front-end (tokens, syntax tree, parser). The `lang` directory contains
everything that gives the syntax tree meaning, plus the session and shell that drive it.
"""

__version__ = "0.1.0"
