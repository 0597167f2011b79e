# monkeylang

A lexer for the Monkey programming language. It splits source text into
tokens.

## Installation

```
pip install .
```

## Using the library

```python
from monkeylang.lexer import Lexer, tokenize
from monkeylang.token import Token, TokenType

tokens = tokenize("let x = 5;")
for token in Lexer("10 != 9;"):
    print(token)
```

`tokenize(source)` returns a list of the tokens in `source`. The end-of-file
token is not included.

Iterating over a `Lexer` yields tokens until the input runs out. The
end-of-file token is not yielded.

`Lexer.next_token()` returns one token per call. Once the input is used up it
returns a token of type `TokenType.EOF`, and it keeps returning one on every
later call.

The lexer handles these tokens:

- identifiers made of ASCII letters and underscores
- integers made of ASCII digits
- the keywords `fn`, `let`, `true`, `false`, `if`, `else` and `return`
- the operators `=`, `+`, `-`, `!`, `*`, `/`, `<`, `>`, `==` and `!=`
- the delimiters `,`, `;`, `(`, `)`, `{` and `}`

Spaces, tabs and line breaks are skipped. Any other character becomes a token
of type `TokenType.ILLEGAL`.

A `Token` is a frozen dataclass with two fields:

- `type`, which is a `TokenType`
- `literal`, which holds the source text of identifiers and integers and is
  empty for every other token

`str(token)` gives the token as it is written in source, for example `==` or
`foo`. For the illegal and end-of-file tokens it gives `ILLEGAL` and `EOF`.

## What the package does not do

The package only produces tokens. It has no parser, no syntax tree, no
evaluator, and no interactive prompt or command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```