import unittest

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from happ_crypto.errors import CapacityExceededError, KeyConfigurationError
from happ_crypto.rsa_encryptor import (
    PKCS1_V15_OVERHEAD_BYTES,
    CryptographyRsaEncryptor,
    MockRsaEncryptor,
    RsaPublicEncryptor,
    load_public_key,
)


def _public_pem(private_key) -> str:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


class TestRsaEncryptors(unittest.TestCase):
        @classmethod
        def setUpClass(cls):
            cls.private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
            cls.public_pem = _public_pem(cls.private_key)
            cls.encryptor = CryptographyRsaEncryptor()

        def test_interface_adherence(self):
            self.assertTrue(issubclass(CryptographyRsaEncryptor, RsaPublicEncryptor))
            self.assertTrue(issubclass(MockRsaEncryptor, RsaPublicEncryptor))

        def test_encrypt_decrypt(self):
            plaintext = b"vless://test-uuid@1.1.1.1:443?security=reality&sni=google.com"
            ciphertext = self.encryptor.encrypt(plaintext, self.public_pem)
            self.assertEqual(len(ciphertext), 256)
            self.assertEqual(self.private_key.decrypt(ciphertext, padding.PKCS1v15()), plaintext)

        def test_padding_is_randomized(self):
            first = self.encryptor.encrypt(b"same input", self.public_pem)
            second = self.encryptor.encrypt(b"same input", self.public_pem)
            self.assertNotEqual(first, second)

        def test_capacity_boundary(self):
            max_len = 2048 // 8 - PKCS1_V15_OVERHEAD_BYTES
            self.assertEqual(max_len, 245)
            self.encryptor.encrypt(b"x" * max_len, self.public_pem)
            with self.assertRaises(CapacityExceededError):
                self.encryptor.encrypt(b"x" * (max_len + 1), self.public_pem)

        def test_plaintext_must_be_bytes(self):
            with self.assertRaises(TypeError):
                self.encryptor.encrypt("text", self.public_pem) # type: ignore

        def test_invalid_key_material(self):
            for bad_pem in ("", "   ", "not a pem", "-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----\n", None):
                with self.assertRaises(KeyConfigurationError, msg=f"accepted {bad_pem!r}"):
                    self.encryptor.encrypt(b"data", bad_pem) # type: ignore

        def test_non_rsa_key_is_rejected(self):
            ec_pem = _public_pem(ec.generate_private_key(ec.SECP256R1()))
            with self.assertRaises(KeyConfigurationError):
                load_public_key(ec_pem)

        def test_load_public_key_reports_key_size(self):
            self.assertEqual(load_public_key(self.public_pem).key_size, 2048)

        def test_mock_encryptor(self):
            mock = MockRsaEncryptor(b"\x01\x02")
            self.assertEqual(mock.encrypt(b"a", "pem-a"), b"\x01\x02")
            self.assertEqual(mock.encrypt(b"b", "pem-b"), b"\x01\x02")
            self.assertEqual(mock.calls, [(b"a", "pem-a"), (b"b", "pem-b")])
            with self.assertRaises(TypeError):
                MockRsaEncryptor("not bytes") # type: ignore

if __name__ == '__main__':
        unittest.main()
