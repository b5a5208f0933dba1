# Escapes bytes into the body of a Go interpreted string literal. NUL and the
# byte order mark are escaped too, since compilers may reject them in source.

BYTE_ORDER_MARK = '\ufeff'

SIMPLE_ESCAPES = {
    0x5C: '\\\\',
    0x22: '\\"',
    0x0A: '\\n',
    0x00: '\\x00',
}

WRITE_CHUNK = 64 * 1024


def _sequence_width(lead):
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_at(data, pos):
    """Return the character encoded at ``pos``, or None if it is not valid UTF-8."""
    width = _sequence_width(data[pos])
    if not width or pos + width > len(data):
        return None
    try:
        # the strict codec rejects overlong forms, surrogates and values past U+10FFFF
        return data[pos:pos + width].decode('utf-8')
    except UnicodeDecodeError:
        return None


def iter_escaped(data):
    pos = 0
    end = len(data)
    while pos < end:
        b = data[pos]
        escaped = SIMPLE_ESCAPES.get(b)
        if escaped is not None:
            yield escaped
            pos += 1
            continue

        char = _decode_at(data, pos)
        if char is not None and char != BYTE_ORDER_MARK:
            yield char
            pos += _sequence_width(b)
            continue

        yield f'\\x{b:02x}'
        pos += 1


def escape(data):
    return ''.join(iter_escaped(data))


def write_literal(out, data):
    # returns the number of input bytes consumed; errors from out propagate
    pending = []
    size = 0
    for chunk in iter_escaped(data):
        pending.append(chunk)
        size += len(chunk)
        if size >= WRITE_CHUNK:
            out.write(''.join(pending).encode('utf-8'))
            pending = []
            size = 0
    if pending:
        out.write(''.join(pending).encode('utf-8'))
    return len(data)
