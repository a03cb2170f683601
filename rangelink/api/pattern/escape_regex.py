import re

_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_regex(literal: str) -> str:
    r"""Backslash-escape the regex metacharacters ``. * + ? ^ $ { } ( ) | [ ] \``.

    Unlike ``re.escape`` nothing else is touched, so the output only differs
    from the input where a metacharacter appears.
    """
    return _SPECIAL.sub(lambda m: "\\" + m.group(0), literal)
