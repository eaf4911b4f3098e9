"""Pure functions for pulling code out of free-form model output."""

import re

_UNTAGGED_BLOCK = re.compile(r"```\n(.*?)```", re.DOTALL)


def extract_code(content: str, language: str) -> str:
    """Return the code inside the first fenced block of *content*.

    Lookup order: first block tagged exactly with *language*, then the first
    untagged block, then the whole input. Every result is stripped. Never raises.
    """
    tagged = re.search(rf"```{re.escape(language)}\n(.*?)```", content, re.DOTALL)
    if tagged:
        return tagged.group(1).strip()

    untagged = _UNTAGGED_BLOCK.search(content)
    if untagged:
        return untagged.group(1).strip()

    return content.strip()
