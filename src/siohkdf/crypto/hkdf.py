""" RFC 5869 - HMAC-based Extract-and-Expand Key Derivation Function (HKDF) """

import math

from siohkdf import InvalidLengthError, LengthTooLongError

MAX_BLOCKS = 255  # the block counter is a single octet


def check_okm_length(digest, okm_length):
    if okm_length <= 0:
        e = f"invalid output length: {okm_length}, it must be positive"
        raise InvalidLengthError(e)
    max_length = MAX_BLOCKS * digest.digest_size
    if okm_length > max_length:
        e = (f"output length too long: {okm_length}, {digest.name} can "
             f"derive at most {max_length} bytes")
        raise LengthTooLongError(e)


def hkdf_extract(digest, salt, input_keying_material):
    if not salt:
        salt = digest.zeros
    pseudorandom_key = digest.hmac(salt, input_keying_material)
    return pseudorandom_key

def hkdf_expand_block(digest, pseudorandom_key, previous_block, info, counter):
    # T(0) is the empty string, not a block of zeros
    msg = b''.join((previous_block, info, counter.to_bytes(1, 'big')))
    return digest.hmac(pseudorandom_key, msg)

def hkdf_expand(digest, pseudorandom_key, info, okm_length):
    check_okm_length(digest, okm_length)
    n = math.ceil(okm_length / digest.digest_size)

    t = [b'']
    for i in range(1, n + 1):
        t.append(hkdf_expand_block(digest, pseudorandom_key, t[i - 1], info, i))

    output_keying_material = b''.join(t)[:okm_length]
    return output_keying_material
