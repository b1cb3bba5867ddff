#!/usr/bin/env python3
"""
Name: base32
Description: encode and decode base32 data

The data are encoded as described for the base32 alphabet in RFC 4648.
When decoding, the input may contain newlines in addition to the bytes
of the formal base32 alphabet.
"""

import base64
import string

from textutils import basenc

__version__ = "0.1.0"

ALPHABET = (string.ascii_uppercase + '234567=').encode()

CODEC = basenc.Codec(
    'base32',
    encode=base64.b32encode,
    decode=base64.b32decode,
    alphabet=ALPHABET,
)


def main(argv=None):
    basenc.run(CODEC, __version__, argv)


if __name__ == "__main__":
    main()
