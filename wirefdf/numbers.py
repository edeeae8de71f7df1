"""Integer scanning for height map cells."""

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_ULONG_MASK = 2**64 - 1


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def parse_int(text, index=0):
    """Read a signed integer from ``text`` starting at ``index``.

    Leading whitespace is skipped, then an optional ``-`` (or ``+`` when no
    minus was seen), then decimal digits. Returns ``(value, next_index)``.
    A positive overflow of a 64-bit signed value gives -1 and a negative one
    gives 0; the result is otherwise wrapped to a 32-bit signed integer.
    """
    length = len(text)
    i = index
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] == "-":
        sign = -1
        i += 1
    if i < length and text[i] == "+" and sign == 1:
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = (result * 10 + ord(text[i]) - ord("0")) & _ULONG_MASK
        if result > _LONG_MAX and sign == 1:
            return -1, i
        if result > _LONG_MAX + 1 and sign == -1:
            return 0, i
        i += 1
    return _to_int32(result * sign), i