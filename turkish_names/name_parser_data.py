# ═════════════════════════════════════════════════════════════════════════════════
# TURKISH ALPHABET TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data consumed by the name parser. Casing tables are applied in
# explicit order before any generic Unicode case mapping:
# 1. LOWERCASE_RULES: dotted/dotless I replacements before str.lower()
# 2. CAPITAL_RULES: leading-letter replacements before title casing
#
# Vowels are enumerated in both cases rather than derived, so membership never
# depends on locale-sensitive case folding.
# ═════════════════════════════════════════════════════════════════════════════════

# Order matters: "i" must become "ı" before "İ" becomes "i".
LOWERCASE_RULES = (
    ("I", "ı"),
    ("i", "ı"),
    ("İ", "i"),
)

# Leading run of the first letter is replaced by a single capital.
CAPITAL_RULES = (
    ("i", "İ"),
    ("ı", "I"),
)

# Characters trimmed from the input and from each cleaned chunk. Unlike
# str.strip(), NUL is trimmed and Unicode spaces such as U+00A0 are not.
TRIM_CHARACTERS = " \t\n\r\x00\x0b"

TURKISH_VOWELS = frozenset(
    {
        "a",
        "e",
        "ı",
        "i",
        "o",
        "ö",
        "u",
        "ü",
        "A",
        "E",
        "I",
        "İ",
        "O",
        "Ö",
        "U",
        "Ü",
    }
)

# Matches a markup tag; an unterminated "<" swallows the rest of the fragment.
TAG_PATTERN = r"<[^>]*(?:>|$)"
