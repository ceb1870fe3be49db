"""Tokenize a small calculator language, reporting the first bad character."""

from enum import Enum

from scanlet import (
    Ok,
    choice,
    from_enum,
    lex,
    one_or_more,
    satisfy,
    tokenize,
)


class Op(Enum):
    EQ = "="
    PLUS = "+"
    STAR = "*"
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"


lexer = choice(
    from_enum(Op),
    lex(one_or_more(satisfy(str.isdigit)), "NUMBER"),
    lex(one_or_more(satisfy(str.isalpha)), "NAME"),
)

for result in tokenize(lexer, "total=(12+x)*3;?"):
    if isinstance(result, Ok):
        print(f"{result.offset:>3}  {result.token}")
    else:
        print(f"{result.offset:>3}  unexpected input")
