import io
import logging
import string

from goembed.literal import write_literal
from goembed.payload import select_payload


# []byte("...") rather than []byte{0x.., ...}: the composite literal blows up
# the Go compiler's memory use on large inputs.
GZIP_PROLOGUE = string.Template('''
import (
\t"bytes"
\t"compress/gzip"
\t"io/ioutil"
)

func init() {
\tr, err := gzip.NewReader(bytes.NewReader(${var}_gzip))
\tif err != nil {
\t\tpanic(err)
\t}
\tdefer r.Close()
\t${var}, err = ioutil.ReadAll(r)
\tif err != nil {
\t\tpanic(err)
\t}
}
''')


def _write(out, text):
    out.write(text.encode('utf-8'))


def emit(config, raw, out):
    """Write the Go source embedding ``raw`` to the binary stream ``out``."""
    _write(out, f'package {config.package}\n\n')

    # the header is already out if compression fails
    payload = select_payload(raw, config.gzip)

    if config.gzip:
        logging.info('Compressed %d bytes to %d', len(raw), len(payload))
        _write(out, GZIP_PROLOGUE.substitute(var=config.var))
        _write(out, f'var {config.var} []byte // set in init\n\n')
        _write(out, f'var {config.var}_gzip = []byte("')
    else:
        _write(out, f'var {config.var} = []byte("')

    write_literal(out, payload)
    _write(out, '")\n')


def generate(config, raw):
    buf = io.BytesIO()
    emit(config, raw, buf)
    return buf.getvalue().decode('utf-8')
