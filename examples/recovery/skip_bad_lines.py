"""Errors are sticky: resume by starting a new tokenizer after the bad line.

inilex never resynchronizes on its own; recovery policy belongs to the caller.
"""

from inilex import TokenizeError, Tokenizer

SOURCE = "[app]\nname=demo\nthis line has no separator\nversion=1.2\n"

lines = SOURCE.splitlines(keepends=True)
start = 0
while start < len(lines):
    tokenizer = Tokenizer(lines[start:])
    try:
        for token in tokenizer:
            print("ok  ", token)
        break
    except TokenizeError as exc:
        bad = start + exc.lineno - 1
        print(f"skip line {bad + 1}: {exc.message}")
        start = bad + 1
