from .digests import CryptographyDigest, HashlibDigest, HMACDigest
from .hkdf import (
    MAX_BLOCKS,
    check_okm_length,
    hkdf_expand,
    hkdf_expand_block,
    hkdf_extract,
)
