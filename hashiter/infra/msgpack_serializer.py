from typing import Any

import msgpack


class KeySerializer:
    """
    Turns hash keys into the bytes fed to the base hash functions.

    Bytes-like keys are hashed as-is. Anything else goes through msgpack,
    which gives the same encoding for equal values across processes
    (str, int, float, bool, None, and lists/tuples/dicts of those).
    """

    @staticmethod
    def serialize(key: Any) -> bytes:
        if isinstance(key, (bytes, bytearray, memoryview)):
            return bytes(key)
        return msgpack.packb(key, use_bin_type=True)

    @staticmethod
    def deserialize(data: bytes) -> Any:
        return msgpack.unpackb(data, raw=False)
