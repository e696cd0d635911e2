"""
Byte obfuscation for the configuration file.

The stream-cipher transform is AES in output-feedback mode with an all-zero
IV of one block. No IV is stored in the file, so the keystream is identical
for every write made with the same key. This is the on-disk format and must
be kept for compatibility; it is not a sound choice for new data.
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.ciphers import Cipher, CipherContext, algorithms, modes
from typing import Optional

from ...core.exceptions import ObfuscationKeyError
from ...core.interfaces.config import IByteTransform


class StreamCipherProvider:
    """Derives a fresh OFB keystream context from a fixed-length key."""

    def __init__(self, key: bytes):
        self._key = key

    def derive_stream(self) -> CipherContext:
        """
        Build a new cipher context.

        Returns:
            Cipher context positioned at the start of the keystream

        Raises:
            ObfuscationKeyError: If the key length is not valid for AES
        """
        try:
            algorithm = algorithms.AES(self._key)
            iv = bytes(algorithm.block_size // 8)
            cipher = Cipher(algorithm, modes.OFB(iv), backend=default_backend())
            # OFB only XORs the keystream, so one context serves both directions
            return cipher.encryptor()
        except (TypeError, ValueError, UnsupportedAlgorithm) as e:
            raise ObfuscationKeyError(f"Unable to initialize AES for obfuscation: {e}") from e


class IdentityTransform(IByteTransform):
    """Leaves bytes unchanged; used when no obfuscation key is configured."""

    @property
    def is_identity(self) -> bool:
        return True

    def apply(self, data: bytes) -> bytes:
        return data


class StreamCipherTransform(IByteTransform):
    """XORs bytes with an AES-OFB keystream derived fresh for every call."""

    def __init__(self, provider: StreamCipherProvider):
        self._provider = provider
        # Fail at construction rather than on the first read or write
        self._provider.derive_stream()

    @property
    def is_identity(self) -> bool:
        return False

    def apply(self, data: bytes) -> bytes:
        stream = self._provider.derive_stream()
        return stream.update(data) + stream.finalize()


def create_transform(obfuscation_key: Optional[bytes]) -> IByteTransform:
    """
    Select the byte transform for a manager.

    Args:
        obfuscation_key: AES key, or None for plain storage

    Returns:
        StreamCipherTransform when a key is given, IdentityTransform otherwise

    Raises:
        ObfuscationKeyError: If the key cannot initialize the cipher
    """
    if obfuscation_key is None:
        return IdentityTransform()
    return StreamCipherTransform(StreamCipherProvider(obfuscation_key))
