# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Hash primitive used for content and identity hashes of nodes.

All hashing in docdelta goes through a `hasher`: a pure function taking
bytes and returning an 8 byte code. The default is `hash_bytes`, and every
node method that hashes accepts another one, so tests can swap it out.
"""

import hashlib

__all__ = ["HASH_SIZE", "hash_bytes", "hash_text", "combine_hashes"]


HASH_SIZE = 8


def hash_bytes(data):
    "Return the 8 byte blake2b digest of data."
    return hashlib.blake2b(bytes(data), digest_size=HASH_SIZE).digest()


def hash_text(text, hasher=hash_bytes):
    return hasher(text.encode("utf8"))


def combine_hashes(codes, hasher=hash_bytes):
    """Combine a sequence of hash codes into one, keeping their order.

    The order of codes is significant: combining [a, b] and [b, a]
    gives different results.
    """
    return hasher(b"".join(codes))
