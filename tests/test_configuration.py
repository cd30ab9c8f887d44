import dataclasses

import siohkdf
from siohkdf import (
    HashFunction,
    HKDFConfiguration,
    InvalidLengthError,
    LengthTooLongError,
    UnsupportedHashError,
)

from . import TestCase, vectors


class TestConfiguration(TestCase):
    def test_configuration_defaults(self):
        config = HKDFConfiguration(HashFunction.SHA256, salt=b'salt')
        self.assertEqual(config.hash_function, HashFunction.SHA256)
        self.assertEqual(config.info, b'')
        self.assertIsNone(config.length)
        self.assertEqual(config.output_length, 32)
        self.assertEqual(config.max_length, 255 * 32)
        self.assertEqual(config.engine.name, 'sha256')

    def test_configuration_normalize(self):
        config = HKDFConfiguration('sha1', salt=bytearray(b'salt'), info=None)
        self.assertIs(config.hash_function, HashFunction.SHA1)
        self.assertEqual(config.salt, b'salt')
        self.assertIsInstance(config.salt, bytes)
        self.assertEqual(config.info, b'')

    def test_configuration_frozen(self):
        config = HKDFConfiguration(HashFunction.SHA256, salt=b'salt')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.length = 10

    def test_configuration_keyword_only(self):
        with self.assertRaises(TypeError):
            HKDFConfiguration(HashFunction.SHA256, b'salt')

    def test_configuration_derive(self):
        _, hash_function, ikm, salt, info, length, _, okm = vectors.rfc5869[0]
        config = HKDFConfiguration(hash_function, salt=salt, info=info, length=length)
        self.assertEqual(config.derive(ikm), okm)
        with config.reader(ikm) as reader:
            self.assertEqual(reader.read(), okm)

    def test_configuration_derive_default_length(self):
        config = HKDFConfiguration(HashFunction.SHA512, salt=b'salt', info=b'info')
        hkdf = siohkdf.new(HashFunction.SHA512)
        self.assertEqual(
            config.derive(b'ikm'),
            hkdf.extract_and_expand(b'salt', b'ikm', b'info', 64),
        )

    def test_configuration_no_salt_warning(self):
        with self.assertLogs('siohkdf.configuration', 'WARNING',
            log_msg="no salt provided, the extraction will use a string of 20 zeros"):
            HKDFConfiguration(HashFunction.SHA1)

    def test_configuration_unsupported_hash(self):
        with self.assertRaises(UnsupportedHashError,
            error_msg="unsupported hash function: 'md5'"):
            HKDFConfiguration('md5', salt=b'salt')

    def test_configuration_invalid_length(self):
        with self.assertRaises(InvalidLengthError):
            HKDFConfiguration(HashFunction.SHA256, salt=b'salt', length=0)
        with self.assertRaises(InvalidLengthError):
            HKDFConfiguration(HashFunction.SHA256, salt=b'salt', length=-5)
        with self.assertRaises(LengthTooLongError):
            HKDFConfiguration(HashFunction.SHA256, salt=b'salt', length=255 * 32 + 1)
        HKDFConfiguration(HashFunction.SHA256, salt=b'salt', length=255 * 32)
