def lower_char(x) -> str:
    """Normalize a selector token to its lower-case first character.

    `'L'`, `'left'` and `'Lower'` all become `'l'`. Anything that is not
    a non-empty string becomes `''`, which no selector accepts.
    """
    if not isinstance(x, str) or not x:
        return ''
    return x[0].lower()
