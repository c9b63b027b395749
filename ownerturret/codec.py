"""Fixed-width field encoders and packed record layout.

uint256 values are encoded as 32-byte big-endian words and bools as a single
byte.  A packed record is its fields concatenated in declaration order, key
field first, with no padding between them.
"""

UINT256_MAX = 2**256 - 1
UINT256_SIZE = 32
BOOL_SIZE = 1

TURRET_OWNER_SIZE = UINT256_SIZE + UINT256_SIZE
OWNER_SHOT_ONCE_SIZE = UINT256_SIZE + BOOL_SIZE


def encode_uint256(value: int) -> bytes:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint256 value must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"uint256 value out of range: {value}")
    return value.to_bytes(UINT256_SIZE, "big")


def decode_uint256(data: bytes) -> int:
    if len(data) != UINT256_SIZE:
        raise ValueError(f"uint256 data must be {UINT256_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def encode_bool(value: bool) -> bytes:
    if not isinstance(value, bool):
        raise TypeError(f"bool value must be a bool, got {type(value).__name__}")
    return b"\x01" if value else b"\x00"


def decode_bool(data: bytes) -> bool:
    if data == b"\x01":
        return True
    if data == b"\x00":
        return False
    raise ValueError(f"bool data must be a single 0x00 or 0x01 byte, got {data!r}")


def _check_size(data: bytes, expected: int, name: str) -> None:
    if len(data) != expected:
        raise ValueError(f"{name} record must be {expected} bytes, got {len(data)}")


def pack_turret_owner(smart_turret_id: int, owner_character_id: int) -> bytes:
    return encode_uint256(smart_turret_id) + encode_uint256(owner_character_id)


def unpack_turret_owner(data: bytes) -> tuple[int, int]:
    _check_size(data, TURRET_OWNER_SIZE, "TurretOwner")
    return decode_uint256(data[:UINT256_SIZE]), decode_uint256(data[UINT256_SIZE:])


def pack_owner_shot_once(smart_turret_id: int, has_been_shot: bool) -> bytes:
    return encode_uint256(smart_turret_id) + encode_bool(has_been_shot)


def unpack_owner_shot_once(data: bytes) -> tuple[int, bool]:
    _check_size(data, OWNER_SHOT_ONCE_SIZE, "OwnerShotOnce")
    return decode_uint256(data[:UINT256_SIZE]), decode_bool(data[UINT256_SIZE:])
