"""Thread safety tests.

Patterns and token tables are immutable and the scanned text is
read-only, so independent iterators over the same text can run in
parallel without interfering.
"""

from concurrent.futures import ThreadPoolExecutor

from scanlet import TokenTableBuilder, alternate, choice, lex, repeat, satisfy, tokenize
from scanlet.text import as_text


def test_shared_text_and_table() -> None:
    table = (
        TokenTableBuilder()
        .register("let", "LET")
        .register("=", "EQ")
        .register(" ", "SPACE")
        .register(";", "SEMI")
        .build()
    )
    number = lex(repeat(satisfy(str.isdigit), 1), "NUMBER")
    name = lex(repeat(satisfy(str.isalpha), 1), "NAME")
    lx = choice(table, number, name)
    text = as_text("let answer = 42;" * 200)
    expected = list(tokenize(lx, text))

    def scan(_: int) -> list:
        return list(tokenize(lx, text))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(scan, range(32)))

    assert all(result == expected for result in results)
    assert bytes(text) == ("let answer = 42;" * 200).encode()


def test_patterns_shared_across_threads() -> None:
    ident = alternate(repeat(satisfy(str.isalpha), 1), "_")

    def match(i: int) -> int | None:
        return ident.match_str("abc" * i + "1")

    with ThreadPoolExecutor(max_workers=8) as pool:
        lengths = list(pool.map(match, range(1, 50)))

    assert lengths == [3 * i for i in range(1, 50)]
