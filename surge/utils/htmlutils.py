from typing import Union

ESCAPES = {
    '<': '&lt;',
    '>': '&gt;',
    '&': '&amp;',
    '"': '&quot;',
    "'": '&#39;',
}
STR_ESCAPES = str.maketrans(ESCAPES)
BYTE_ESCAPES = {ord(char): replacement.encode() for char, replacement in ESCAPES.items()}


def escape(buffer: Union[str, bytes]) -> Union[str, bytes]:
    """
    Makes a string safe for putting it into html body. Only <, >, &, " and '
    are replaced, every other character stays as it is

    Bytes are escaped byte by byte, and bytes are returned in this case

    Escaping already escaped string will escape every & again, so
    escape(escape('&')) == '&amp;amp;'
    """

    if isinstance(buffer, str):
        return buffer.translate(STR_ESCAPES)

    return b''.join(BYTE_ESCAPES.get(byte, bytes((byte,))) for byte in buffer)
