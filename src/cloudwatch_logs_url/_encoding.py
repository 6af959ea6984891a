from __future__ import annotations

from urllib.parse import quote


def encode_text(text: str, single_pass: bool = False) -> str:
    """
    Encode `text` for the CloudWatch console's fragment router.

    The console reads everything after ``#`` as a nested URL, so values are
    percent-encoded twice (``/`` -> ``%2F`` -> ``%252F``). The router then
    treats ``%`` itself as special, so each ``%`` in the result is written
    as ``$`` instead.

    Use `single_pass` for the structural delimiters (``?``, ``&``, ``=``)
    of the nested query string, which must be escaped exactly once.

    :param text: Arbitrary text; encoded as UTF-8 bytes
    :param single_pass: Percent-encode once instead of twice
    :return: The encoded token, e.g. ``'/aws'`` -> ``'$252Faws'``
    """
    # `safe=''` leaves only letters, digits and "-_.~" unescaped
    result = quote(text, safe='')
    if not single_pass:
        result = quote(result, safe='')

    return result.replace('%', '$')
