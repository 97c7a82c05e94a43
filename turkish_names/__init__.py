from turkish_names.name_parser import (
    NameParser,
    NameParserConfig,
    ParsedName,
    ParseResult,
    TurkishNameParser,
    parse_turkish_name,
    parse_turkish_names,
)

__all__ = [
    "NameParser",
    "NameParserConfig",
    "ParsedName",
    "ParseResult",
    "TurkishNameParser",
    "parse_turkish_name",
    "parse_turkish_names",
]
