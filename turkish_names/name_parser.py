"""
Turkish Name Parsing Module

This module normalizes free-form personal name strings into a structured
{first name, middle name, last name} record using Turkish orthographic rules, and
reports the fragments that could not plausibly be part of a name.

## Overview

The core functionality is provided by the `TurkishNameParser` class, which runs a
fixed pipeline over the whitespace-separated fragments of the input:

1. **Tokenization**: Trim the input and split it on single spaces
2. **Cell Normalization**: Strip markup, Turkish-aware lowercasing, drop non-letters,
   collapse an accidentally doubled initial letter
3. **Validity Filtering**: Reject fragments without vowels, made only of vowels, or empty
4. **Title Casing**: Capitalize with dotted/dotless I rules
5. **Role Assignment**: Map survivors to first/middle/last name by count
6. **Duplicate Collapse**: Drop a middle name identical to the first name

## Architecture

- **NameParserConfig**: Immutable alphabet tables and patterns
- **NormalizationService**: Per-fragment cleaning and capitalization
- **NameValidator**: Vowel heuristic and survivor/reject partitioning
- **TurkishNameParser**: Stateless engine returning an immutable `ParseResult`
- **NameParser**: Chaining facade keeping the most recent `ParseResult`

## Usage Examples

```python
from turkish_names.name_parser import NameParser, parse_turkish_name

parser = NameParser().parse("cem CEM ünalan")
parser.as_array()
# Returns: {"first_name": "Cem", "last_name": "Ünalan"}

parse_turkish_name("İLHAN IRMAK")
# Returns: (True, "İlhan Irmak")

parse_turkish_name("A.")
# Returns: (False, "needs at least 2 valid name tokens")
```

## Error Handling

An unparseable name is a data outcome, never an exception. `ParseResult.success` is
False, `ParseResult.name` is None and `error_message` explains why. Parsing raises
only `TypeError`, for non-string input. Building a config with an empty separator
raises `ValueError`.

## Thread Safety

`TurkishNameParser` holds nothing but its frozen configuration and can be shared.
`NameParser` keeps the last result and should not be shared between threads.
"""

from __future__ import annotations
import logging
import re
import unicodedata
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from turkish_names.name_parser_data import (
    CAPITAL_RULES,
    LOWERCASE_RULES,
    TAG_PATTERN,
    TRIM_CHARACTERS,
    TURKISH_VOWELS,
)


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════

NOT_ENOUGH_TOKENS = "needs at least 2 valid name tokens"


@dataclass(frozen=True)
class ParsedName:
    """Name split into role slots."""

    first_name: str
    last_name: str
    middle_name: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Slots in first/middle/last order; an absent middle name is omitted."""
        data = {"first_name": self.first_name}
        if self.middle_name is not None:
            data["middle_name"] = self.middle_name
        data["last_name"] = self.last_name
        return data

    def as_string(self, separator: str = " ") -> str:
        return separator.join(self.as_dict().values())

    def without_repeated_middle_name(self) -> "ParsedName":
        if self.middle_name is not None and self.middle_name == self.first_name:
            return replace(self, middle_name=None)
        return self


@dataclass(frozen=True)
class ParseResult:
    """Immutable outcome of a single parse."""

    success: bool
    raw: str
    tokens: Tuple[str, ...]
    invalid_chunks: Tuple[str, ...] = ()
    name: Optional[ParsedName] = None
    error_message: Optional[str] = None

    @classmethod
    def success_with_name(
        cls, raw: str, tokens: Tuple[str, ...], invalid_chunks: Tuple[str, ...], name: ParsedName
    ) -> "ParseResult":
        return cls(success=True, raw=raw, tokens=tokens, invalid_chunks=invalid_chunks, name=name)

    @classmethod
    def failure(
        cls, raw: str, tokens: Tuple[str, ...], invalid_chunks: Tuple[str, ...], error_message: str
    ) -> "ParseResult":
        return cls(
            success=False, raw=raw, tokens=tokens, invalid_chunks=invalid_chunks, error_message=error_message
        )

    @classmethod
    def unparsed(cls) -> "ParseResult":
        """Placeholder for a parser that has not seen any input yet."""
        return cls(success=False, raw="", tokens=())

    def as_dict(self) -> Optional[Dict[str, str]]:
        return self.name.as_dict() if self.name is not None else None

    def as_string(self, separator: str = " ") -> str:
        return self.name.as_string(separator) if self.name is not None else ""

    def to_tuple(self) -> Tuple[bool, str]:
        """(success, formatted name) or (failure, error message)."""
        if self.success:
            return (True, self.as_string())
        return (False, self.error_message or "")


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameParserConfig:
    """Alphabet tables and patterns used by the pipeline."""

    vowels: FrozenSet[str]
    # Ordered (source, target) replacements applied before str.lower()
    lowercase_rules: Tuple[Tuple[str, str], ...]
    # Ordered (leading lowercase letter, capital) pairs used instead of generic title casing
    capital_rules: Tuple[Tuple[str, str], ...]
    tag_pattern: re.Pattern[str]
    trim_characters: str
    separator: str

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")

    @classmethod
    def create_default(cls) -> "NameParserConfig":
        return cls(
            vowels=TURKISH_VOWELS,
            lowercase_rules=LOWERCASE_RULES,
            capital_rules=CAPITAL_RULES,
            tag_pattern=re.compile(TAG_PATTERN),
            trim_characters=TRIM_CHARACTERS,
            separator=" ",
        )

    def with_vowels(self, vowels: Iterable[str]) -> "NameParserConfig":
        return replace(self, vowels=frozenset(vowels))

    def with_separator(self, separator: str) -> "NameParserConfig":
        """Immutable update; raises ValueError for an empty separator."""
        return replace(self, separator=separator)


# ════════════════════════════════════════════════════════════════════════════════
# NORMALIZATION SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class NormalizationService:
    """Per-fragment cleaning and capitalization."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def clean_cell(self, cell: str) -> str:
        """Run the cleaning steps in their fixed order."""
        cell = self.strip_tags(cell)
        cell = self.convert_to_lowercase(cell)
        cell = self.remove_chars_and_numbers(cell)
        cell = cell.strip(self._config.trim_characters)
        return self.remove_repeating_starting_letters(cell)

    def strip_tags(self, string: str) -> str:
        return self._config.tag_pattern.sub("", string)

    def convert_to_lowercase(self, string: str) -> str:
        """
        Lowercase with Turkish dotted and dotless I.

        str.lower() maps "I" to "i" and "İ" to "i" plus a combining dot, so both
        letters are replaced before the generic mapping runs.
        """
        for source, target in self._config.lowercase_rules:
            string = string.replace(source, target)
        return string.lower()

    def remove_chars_and_numbers(self, string: str) -> str:
        """Keep only characters in the Unicode letter categories."""
        return "".join(c for c in string if unicodedata.category(c).startswith("L"))

    def remove_repeating_starting_letters(self, string: str) -> str:
        # Turkish names never start with a doubled letter ("aahmet" -> "ahmet")
        if len(string) > 1 and string[0] == string[1]:
            return string[1:]
        return string

    def capitalize_first_letter(self, string: str) -> str:
        """
        Title-case a fragment. A leading "i" becomes "İ" and a leading "ı" becomes "I";
        str.title() would turn both into "I".
        """
        for lower, capital in self._config.capital_rules:
            if string.startswith(lower):
                string = capital + string.lstrip(lower)
                break
        return string.title()


# ════════════════════════════════════════════════════════════════════════════════
# VALIDATION SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class NameValidator:
    """Vowel heuristic for telling name fragments from noise."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def number_of_vowels(self, string: str) -> int:
        return sum(1 for c in string if c in self._config.vowels)

    def check_if_name_is_invalid(self, string: str) -> bool:
        """
        Returns True when the fragment looks like a name.

        A fragment is rejected when it is empty, has no vowels, or has nothing but
        vowels.
        """
        length = len(string)
        vowels = self.number_of_vowels(string)
        return length >= 1 and vowels >= 1 and length != vowels

    def partition(self, cells: Iterable[str]) -> Tuple[List[str], List[str]]:
        """Split cells into (valid, invalid), each in encounter order."""
        valid: List[str] = []
        invalid: List[str] = []
        for cell in cells:
            if self.check_if_name_is_invalid(cell):
                valid.append(cell)
            else:
                invalid.append(cell)
        return valid, invalid


# ════════════════════════════════════════════════════════════════════════════════
# PARSER ENGINE
# ════════════════════════════════════════════════════════════════════════════════


class TurkishNameParser:
    """Stateless Turkish name parsing engine."""

    def __init__(self, config: Optional[NameParserConfig] = None):
        self._config = config or NameParserConfig.create_default()
        self._normalizer = NormalizationService(self._config)
        self._validator = NameValidator(self._config)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    @property
    def normalizer(self) -> NormalizationService:
        return self._normalizer

    @property
    def validator(self) -> NameValidator:
        return self._validator

    def tokenize(self, raw_name: str) -> List[str]:
        # Single-separator split: runs of spaces leave empty tokens behind
        return raw_name.strip(self._config.trim_characters).split(self._config.separator)

    def parse_name(self, raw_name: str) -> ParseResult:
        """
        Main API method: normalize a raw name and assign it to role slots.

        Returns ParseResult with:
        - success=True, name=ParsedName if at least two fragments survive
        - success=False, error_message=reason otherwise
        """
        if not isinstance(raw_name, str):
            raise TypeError(f"name must be a str, got {type(raw_name).__name__}")

        tokens = tuple(self.tokenize(raw_name))
        cells = [self._normalizer.clean_cell(token) for token in tokens]

        valid_cells, invalid_cells = self._validator.partition(cells)
        for cell in invalid_cells:
            logging.debug(f"Rejected name chunk {cell!r}")

        names = [self._normalizer.capitalize_first_letter(cell) for cell in valid_cells]
        parsed = self._order_names(names)
        if parsed is None:
            logging.debug(f"No name found in {len(tokens)} token(s), {len(names)} valid")
            return ParseResult.failure(raw_name, tokens, tuple(invalid_cells), NOT_ENOUGH_TOKENS)

        return ParseResult.success_with_name(
            raw_name, tokens, tuple(invalid_cells), parsed.without_repeated_middle_name()
        )

    def _order_names(self, names: List[str]) -> Optional[ParsedName]:
        """Assign fragments to slots by count; everything past the third joins the last name."""
        count = len(names)
        if count <= 1:
            return None
        if count == 2:
            return ParsedName(first_name=names[0], last_name=names[1])
        return ParsedName(
            first_name=names[0],
            middle_name=names[1],
            last_name=self._config.separator.join(names[2:]),
        )


# ════════════════════════════════════════════════════════════════════════════════
# CHAINING FACADE
# ════════════════════════════════════════════════════════════════════════════════


class NameParser:
    """
    Method-chaining wrapper around `TurkishNameParser`.

    Each call to `parse` replaces the stored result wholesale, so nothing carries
    over from a previous name.
    """

    def __init__(self, parser: Optional[TurkishNameParser] = None):
        self._parser = parser or TurkishNameParser()
        self._result = ParseResult.unparsed()

    def parse(self, name: str) -> "NameParser":
        self._result = self._parser.parse_name(name)
        return self

    @property
    def result(self) -> ParseResult:
        return self._result

    def get_raw_name(self) -> str:
        return self._result.raw

    def get_raw_array(self) -> List[str]:
        return list(self._result.tokens)

    def as_array(self) -> Optional[Dict[str, str]]:
        return self._result.as_dict()

    def as_string(self) -> str:
        return self._result.as_string(self._parser.config.separator)

    def get_invalid_chunks(self) -> List[str]:
        return list(self._result.invalid_chunks)

    def is_valid(self) -> bool:
        return self._result.success

    def __str__(self) -> str:
        return self.as_string()

    # Stage helpers

    def convert_to_lowercase(self, string: str) -> str:
        return self._parser.normalizer.convert_to_lowercase(string)

    def remove_chars_and_numbers(self, string: str) -> str:
        return self._parser.normalizer.remove_chars_and_numbers(string)

    def remove_repeating_starting_letters(self, string: str) -> str:
        return self._parser.normalizer.remove_repeating_starting_letters(string)

    def capitalize_first_letter(self, string: str) -> str:
        return self._parser.normalizer.capitalize_first_letter(string)

    def number_of_vowels(self, string: str) -> int:
        return self._parser.validator.number_of_vowels(string)

    def check_if_name_is_invalid(self, string: str) -> bool:
        return self._parser.validator.check_if_name_is_invalid(string)


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global parser instance for module-level functions
_global_parser: Optional[TurkishNameParser] = None


def _get_global_parser() -> TurkishNameParser:
    """Get or create the global parser instance."""
    global _global_parser
    if _global_parser is None:
        _global_parser = TurkishNameParser()
    return _global_parser


def parse_turkish_name(name: str) -> Tuple[bool, str]:
    """
    Module-level convenience function for Turkish name parsing.

    Args:
        name: Input name string

    Returns:
        Tuple of (success: bool, formatted_name_or_error: str)
    """
    return _get_global_parser().parse_name(name).to_tuple()


def parse_turkish_names(names: Iterable[str]) -> List[ParseResult]:
    """Parse several names with the global parser, preserving input order."""
    parser = _get_global_parser()
    return [parser.parse_name(name) for name in names]
