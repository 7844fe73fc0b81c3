"""Build a {section: {key: value}} dict on top of the token stream.

Decoding is not part of inilex; this shows the consumer side.
"""

from inilex import SectionToken, SettingToken, Tokenizer

SOURCE = """\
; global settings
debug = false

[database]
host = db.internal   # primary
port = 5432
"""


def to_dict(source: str, default_section: str = "") -> dict[str, dict[str, str]]:
    config: dict[str, dict[str, str]] = {}
    section = default_section
    for token in Tokenizer(source):
        if isinstance(token, SectionToken):
            section = token.name.strip()
            config.setdefault(section, {})
        elif isinstance(token, SettingToken):
            config.setdefault(section, {})[token.left.strip()] = token.right.strip()
    return config


print(to_dict(SOURCE))
