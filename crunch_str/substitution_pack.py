"""
Domain-specific substitution packs.

Substitution packs are JSON files that extend the built-in substitution
table with extra whole-word short forms: team jargon, project names,
habitual abbreviations. They can be loaded at runtime and passed to
crunch(extra_substitutions=...).

Format, either of:
    {"tomorrow": "tmrw", "meeting": "mtg"}
    [{"word": "tomorrow", "replacement": "tmrw"}, ...]

Replacements must be shorter than the words they replace; that is checked
when the table is built, not here.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)


def load_substitution_pack(pack_path_or_name: str, search_dirs=None) -> dict:
    """Load a substitution pack from a JSON file.

    Args:
        pack_path_or_name: Either a full file path, or a pack name to search for.
        search_dirs: Optional list of directories to search (when using a name).
                     Defaults to ./substitution_packs/ relative to this module.

    Returns:
        dict of {word: replacement} ready for crunch(extra_substitutions=...).
    """
    if os.path.isfile(pack_path_or_name):
        pack_file = pack_path_or_name
    else:
        if search_dirs is None:
            search_dirs = [
                os.path.join(os.path.dirname(os.path.abspath(__file__)), "substitution_packs"),
            ]
        pack_file = None
        for d in search_dirs:
            candidate = os.path.join(d, f"{pack_path_or_name}.json")
            if os.path.isfile(candidate):
                pack_file = candidate
                break
        if not pack_file:
            raise FileNotFoundError(
                f"Substitution pack '{pack_path_or_name}' not found in {search_dirs}"
            )

    with open(pack_file, "r", encoding="utf-8") as f:
        entries = json.load(f)

    if isinstance(entries, dict):
        pairs = entries.items()
    elif isinstance(entries, list):
        pairs = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"{pack_file}: list entries must be objects, got {entry!r}")
            pairs.append((entry.get("word", ""), entry.get("replacement", "")))
    else:
        raise ValueError(f"{pack_file}: expected a JSON object or list, got {type(entries).__name__}")

    substitutions = {}
    for word, replacement in pairs:
        if not isinstance(word, str) or not isinstance(replacement, str):
            raise ValueError(f"{pack_file}: words and replacements must be strings")
        if word and replacement:
            substitutions[word.lower()] = replacement

    logger.debug("loaded %d substitutions from %s", len(substitutions), pack_file)
    return substitutions
