"""Inflection helpers for aggregation labels.

Covers the regular English forms used by relation labels such as
"samples", "data_files" or "assay_assets".
"""

from __future__ import annotations

_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")
_VOWELS = "aeiou"


def humanize(label: str) -> str:
    """Turn a relation label into a readable phrase ("data_files" -> "Data files")."""
    words = label.removesuffix("_id").replace("_", " ").strip()
    return words[:1].upper() + words[1:]


def singularize(word: str) -> str:
    """Singular form of a regular plural ("samples" -> "sample")."""
    lower = word.lower()
    if lower.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if lower.endswith("sses") or lower.endswith(("ches", "shes", "xes")):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith("ss"):
        return word[:-1]
    return word


def pluralize_word(word: str) -> str:
    """Plural form of a regular singular ("study" -> "studies")."""
    lower = word.lower()
    if lower.endswith("y") and len(word) > 1 and lower[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if lower.endswith(_SIBILANT_ENDINGS):
        return word + "es"
    return word + "s"


def pluralize(count: int, singular: str) -> str:
    """Count followed by the matching noun form ("1 sample", "5 samples")."""
    noun = singular if count == 1 else pluralize_word(singular)
    return f"{count} {noun}"
