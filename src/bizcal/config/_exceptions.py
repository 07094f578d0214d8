from __future__ import annotations


class ConfigError(ValueError):
    """Calendar configuration could not be read or validated.

    Common causes:
    - Missing or unreadable calendar file
    - Malformed YAML, or a document that is not a mapping
    - Unknown weekday name or unparseable holiday date
    - Unknown top-level keys
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        self.message = message
        self.source = source
        super().__init__(f"{message} [source={source}]" if source else message)
