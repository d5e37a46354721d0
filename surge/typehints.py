from typing import Iterable, Mapping, Tuple, Union

HeaderName = str
HeaderValue = str
HeaderPair = Tuple[HeaderName, HeaderValue]
HeadersInput = Union[Mapping[HeaderName, Union[HeaderValue, Iterable[HeaderValue]]],
                     Iterable[HeaderPair]]
StatusCode = int
Chunk = bytes
Body = Union[str, bytes, Iterable[Chunk]]
