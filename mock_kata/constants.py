from typing import ClassVar


class Defaults:
    ACCEPTED_FORMATS: ClassVar[tuple[str, ...]] = ("4.0", "3.1")
    MAX_AGE_MONTHS = 1
    CATALOG_FILE = "things.toml"
    CONFIG_FILE = "mock_kata.toml"
    LOOKUP_REPEAT = 1


class Constraints:
    MIN_AGE_MONTHS = 1
    MAX_LOOKUP_REPEAT = 1000


class EnvVars:
    ACCEPTED_FORMATS = "MOCK_KATA_ACCEPTED_FORMATS"
    MAX_AGE_MONTHS = "MOCK_KATA_MAX_AGE_MONTHS"
    CATALOG = "MOCK_KATA_CATALOG"
