import dataclasses
import functools
import logging

from siohkdf.crypto.digests import HMACDigest
from siohkdf.crypto.hkdf import check_okm_length
from siohkdf.engine import HKDF
from siohkdf.hashes import HashFunction
from siohkdf.utils import as_bytes

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class HKDFConfiguration:
    hash_function: HashFunction
    _: dataclasses.KW_ONLY

    salt: bytes = b''
    info: bytes = b''
    length: int | None = None  # digest size

    @functools.cached_property
    def engine(self):
        return HKDF(HMACDigest.for_hash_function(self.hash_function))

    @property
    def max_length(self):
        return self.engine.max_length

    @property
    def output_length(self):
        return self.engine.digest_size if self.length is None else self.length

    def __post_init__(self):
        # frozen, go through object.__setattr__ to normalize the fields
        hash_function = HMACDigest.for_hash_function(self.hash_function).hash_function
        object.__setattr__(self, 'hash_function', hash_function)
        object.__setattr__(self, 'salt', as_bytes(self.salt, 'salt'))
        object.__setattr__(self, 'info', as_bytes(self.info, 'info'))
        check_okm_length(self.engine.digest, self.output_length)
        if not self.salt:
            w =("no salt provided, the extraction will use a string of "
                f"{self.engine.digest_size} zeros")
            logger.warning(w)

    def derive(self, ikm):
        return self.engine.extract_and_expand(
            self.salt, ikm, self.info, self.output_length)

    def reader(self, ikm):
        prk = self.engine.extract(self.salt, ikm)
        return self.engine.new_reader(prk, self.info, self.output_length)
