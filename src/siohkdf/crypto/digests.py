# class names
# ruff: noqa: N801
import hashlib
import hmac
from abc import abstractmethod
from typing import ClassVar

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from siohkdf import UnsupportedHashError
from siohkdf.hashes import HashFunction
from siohkdf.utils import RegistryMeta


class HMACDigest(metaclass=RegistryMeta):
    """
    The keyed-hash capability HKDF is built upon: compute
    ``HMAC(key, message)`` with an output of ``digest_size`` bytes.

    Subclasses that set ``hash_function`` are registered and can be
    looked up with ``HMACDigest[HashFunction.SHA256]``.
    """
    _registry: ClassVar = {}

    hash_function: HashFunction | None = None
    name: str
    digest_size: int

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'hash_function' in vars(cls):
            cls._registry[cls.hash_function] = cls

    @classmethod
    def for_hash_function(cls, hash_function):
        try:
            hash_function = HashFunction(hash_function)
        except ValueError as exc:
            e = f"unsupported hash function: {hash_function!r}"
            raise UnsupportedHashError(e) from exc
        return cls[hash_function]()

    @classmethod
    def for_hash(cls, hash_):
        match hash_:
            case HMACDigest():
                return hash_
            case HashFunction():
                return cls[hash_]()
            case hashes.HashAlgorithm():
                return CryptographyDigest(hash_)
            case type() if issubclass(hash_, HMACDigest):
                return hash_()
            case str():
                return HashlibDigest(hash_)
            case _ if callable(hash_):
                return HashlibDigest(hash_)

        e = f"unsupported hash: {hash_!r}"
        raise UnsupportedHashError(e)

    @property
    def zeros(self):
        return b'\x00' * self.digest_size

    @abstractmethod
    def hmac(self, key, message):
        raise NotImplementedError

    def __repr__(self):
        return f'<{type(self).__name__} {self.name} ({self.digest_size} bytes)>'


class HashlibDigest(HMACDigest):
    """ HMAC over any constructor or algorithm name :mod:`hmac` accepts """

    def __init__(self, digestmod=None):
        if digestmod is not None:
            self.digestmod = digestmod
        try:
            if isinstance(self.digestmod, str):
                probe = hashlib.new(self.digestmod)
            else:
                probe = self.digestmod()
        except (TypeError, ValueError) as exc:
            e = f"unsupported hash: {self.digestmod!r}"
            raise UnsupportedHashError(e) from exc
        self.name = getattr(probe, 'name', type(probe).__name__)
        if not getattr(probe, 'digest_size', 0) or not getattr(probe, 'block_size', 0):
            e = f"unsupported hash: {self.name}, a fixed output size is required"
            raise UnsupportedHashError(e)
        self.digest_size = probe.digest_size

    def hmac(self, key, message):
        return hmac.digest(key, message, self.digestmod)


class CryptographyDigest(HMACDigest):
    """ HMAC over a :mod:`cryptography` hash algorithm instance """

    def __init__(self, algorithm):
        if isinstance(algorithm, hashes.ExtendableOutputFunction):
            e = f"unsupported hash: {algorithm.name}, a fixed output size is required"
            raise UnsupportedHashError(e)
        self.algorithm = algorithm
        self.name = algorithm.name
        self.digest_size = algorithm.digest_size

    def hmac(self, key, message):
        mac = crypto_hmac.HMAC(key, self.algorithm)
        mac.update(message)
        return mac.finalize()


class HMAC_SHA1(HashlibDigest):
    hash_function = HashFunction.SHA1
    digestmod = hashlib.sha1

class HMAC_SHA256(HashlibDigest):
    hash_function = HashFunction.SHA256
    digestmod = hashlib.sha256

class HMAC_SHA384(HashlibDigest):
    hash_function = HashFunction.SHA384
    digestmod = hashlib.sha384

class HMAC_SHA512(HashlibDigest):
    hash_function = HashFunction.SHA512
    digestmod = hashlib.sha512
