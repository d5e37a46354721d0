from typing import Union


def make_sure_bytes(obj: Union[str, bytes, bytearray], encoding: str = 'utf-8') -> bytes:
    if isinstance(obj, str):
        return obj.encode(encoding)

    return bytes(obj)
