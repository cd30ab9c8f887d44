import logging

from siohkdf.crypto.digests import HMACDigest
from siohkdf.crypto.hkdf import (
    MAX_BLOCKS,
    check_okm_length,
    hkdf_expand,
    hkdf_extract,
)
from siohkdf.reader import HKDFReader
from siohkdf.utils import as_bytes

logger = logging.getLogger(__name__)


def new(hash_function):
    """
    Create an :class:`HKDF` engine for one of the enumerated
    :class:`~siohkdf.hashes.HashFunction`, given as a member or by its
    value (e.g. ``'sha256'``).

    :raises UnsupportedHashError: when ``hash_function`` is not one of
        the enumerated hash functions.
    """
    return HKDF(HMACDigest.for_hash_function(hash_function))


def new_with_hash(hash_):
    """
    Create an :class:`HKDF` engine for an arbitrary hash: a hashlib
    constructor, a hashlib algorithm name, a
    :class:`cryptography.hazmat.primitives.hashes.HashAlgorithm`
    instance or an :class:`~siohkdf.crypto.digests.HMACDigest`.

    :raises UnsupportedHashError: when ``hash_`` is none of the above or
        doesn't have a fixed output size.
    """
    return HKDF(HMACDigest.for_hash(hash_))


class HKDF:
    """
    Derivation engine bound to a single hash function.

    The engine holds no other state, it is safe to share it across
    threads.
    """

    def __init__(self, digest: HMACDigest):
        self._digest = digest
        logger.debug("new HKDF engine using %s (%d bytes)",
            digest.name, digest.digest_size)

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'

    @property
    def digest(self):
        return self._digest

    @property
    def name(self):
        return self._digest.name

    @property
    def digest_size(self):
        return self._digest.digest_size

    @property
    def max_length(self):
        return MAX_BLOCKS * self._digest.digest_size

    def extract(self, salt: bytes | None, ikm: bytes) -> bytes:
        """
        Extract a pseudorandom key of :attr:`digest_size` bytes out of the
        input keying material. An empty salt is replaced by a string of
        :attr:`digest_size` zeros.
        """
        return hkdf_extract(
            self._digest, as_bytes(salt, 'salt'), as_bytes(ikm, 'ikm'))

    def expand(self, prk: bytes, info: bytes | None, length: int) -> bytes:
        """
        Expand the pseudorandom key into ``length`` bytes of output keying
        material bound to ``info``.

        :raises InvalidLengthError: when ``length`` isn't positive.
        :raises LengthTooLongError: when ``length`` exceeds
            :attr:`max_length`.
        """
        return hkdf_expand(
            self._digest, as_bytes(prk, 'prk'), as_bytes(info, 'info'), length)

    def extract_and_expand(
        self, salt: bytes | None, ikm: bytes, info: bytes | None, length: int
    ) -> bytes:
        check_okm_length(self._digest, length)
        return self.expand(self.extract(salt, ikm), info, length)

    def new_reader(
        self, prk: bytes, info: bytes | None, length: int | None = None
    ) -> HKDFReader:
        """
        Stream the output of :meth:`expand`. Without ``length`` the reader
        produces :attr:`max_length` bytes.
        """
        if length is None:
            length = self.max_length
        return HKDFReader(
            self._digest, as_bytes(prk, 'prk'), as_bytes(info, 'info'), length)
