# Decoder for Go interpreted string literal bodies, used to check round trips.
import string


_UNESCAPE_SIMPLE = {
    'a': b'\a',
    'b': b'\b',
    'f': b'\f',
    'n': b'\n',
    'r': b'\r',
    't': b'\t',
    'v': b'\v',
    '\\': b'\\',
    '"': b'"',
    "'": b"'",
}

_HEX_WIDTH = {'x': 2, 'u': 4, 'U': 8}


def unescape(text):
    """Decode the body of a Go interpreted string literal back into bytes."""
    out = bytearray()
    pos = 0
    end = len(text)
    while pos < end:
        char = text[pos]
        if char == '\n':
            raise ValueError(f'raw newline at offset {pos}')
        if char != '\\':
            out += char.encode('utf-8')
            pos += 1
            continue

        if pos + 1 >= end:
            raise ValueError('literal ends inside an escape')
        kind = text[pos + 1]
        if kind in _UNESCAPE_SIMPLE:
            out += _UNESCAPE_SIMPLE[kind]
            pos += 2
        elif kind in _HEX_WIDTH:
            width = _HEX_WIDTH[kind]
            digits = text[pos + 2:pos + 2 + width]
            if len(digits) != width or not all(c in string.hexdigits for c in digits):
                raise ValueError(f'bad \\{kind} escape at offset {pos}')
            value = int(digits, 16)
            if kind == 'x':
                out.append(value)
            else:
                out += chr(value).encode('utf-8')
            pos += 2 + width
        elif kind in '01234567':
            digits = text[pos + 1:pos + 4]
            if len(digits) != 3 or not all(c in string.octdigits for c in digits):
                raise ValueError(f'bad octal escape at offset {pos}')
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f'bad octal escape at offset {pos}')
            out.append(value)
            pos += 4
        else:
            raise ValueError(f"unknown escape '\\{kind}' at offset {pos}")
    return bytes(out)
