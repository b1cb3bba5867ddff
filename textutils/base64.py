#!/usr/bin/env python3
"""
Name: base64
Description: encode and decode base64 data

The data are encoded as described for the base64 alphabet in RFC 4648.
When decoding, the input may contain newlines in addition to the bytes
of the formal base64 alphabet.
"""

import base64
import string
from functools import partial

from textutils import basenc

__version__ = "0.1.0"

ALPHABET = (string.ascii_letters + string.digits + '+/=').encode()

CODEC = basenc.Codec(
    'base64',
    encode=base64.b64encode,
    # validate=True rejects stray bytes instead of silently skipping them.
    decode=partial(base64.b64decode, validate=True),
    alphabet=ALPHABET,
)


def main(argv=None):
    basenc.run(CODEC, __version__, argv)


if __name__ == "__main__":
    main()
