"""Column types for on-chain style integer identifiers."""

from sqlalchemy import LargeBinary
from sqlalchemy.types import TypeDecorator

from ownerturret.codec import UINT256_SIZE, decode_uint256, encode_uint256


class Uint256(TypeDecorator):
    """Unsigned 256-bit integer stored as a 32-byte big-endian word.

    Values outside [0, 2**256 - 1] are rejected when the statement is
    executed; SQLAlchemy surfaces the codec error as a StatementError.
    Byte order matches numeric order, so comparisons and primary-key
    ordering behave like integer comparisons on every backend.
    """

    impl = LargeBinary(UINT256_SIZE)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return encode_uint256(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return decode_uint256(bytes(value))
