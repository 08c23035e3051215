"""Schema hash derived from a credential type identifier."""

from Crypto.Hash import keccak

SCHEMA_HASH_LENGTH = 16


class SchemaHash:
    """Fixed size hash identifying a credential schema type inside claims."""

    def __init__(self, value: bytes):
        """Initialize a SchemaHash from its raw bytes."""
        if len(value) != SCHEMA_HASH_LENGTH:
            raise ValueError(
                f"schema hash must be {SCHEMA_HASH_LENGTH} bytes, got {len(value)}"
            )
        self._value = bytes(value)

    @classmethod
    def from_hex(cls, value: str) -> "SchemaHash":
        """Parse a hex encoded schema hash."""
        return cls(bytes.fromhex(value))

    def __bytes__(self) -> bytes:
        """Raw hash bytes."""
        return self._value

    def hex(self) -> str:
        """Hex encoding of the hash."""
        return self._value.hex()

    def to_int(self) -> int:
        """Integer form of the hash, read little-endian as claims store it."""
        return int.from_bytes(self._value, "little")

    def __eq__(self, other: object) -> bool:
        """Compare hashes by value."""
        return isinstance(other, SchemaHash) and other._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"<SchemaHash({self.hex()})>"


def create_schema_hash(schema_id: bytes) -> SchemaHash:
    """Compute the schema hash of a schema identifier.

    The hash is the last 16 bytes of the Keccak-256 digest of the identifier.
    """
    digest = keccak.new(digest_bits=256, data=schema_id).digest()
    return SchemaHash(digest[-SCHEMA_HASH_LENGTH:])
