"""Tokenize a small INI document with the default configuration."""

from inilex import tokenize

for token in tokenize("[server]\nhost = example.org ; primary\nport=8080\n"):
    print(f"{token.type.name:8} {token.lineno}:{token.col}  {token}")
