from dataclasses import dataclass, field

from .entities import Headers


@dataclass
class Settings:
    """
    Settings of rendering responses into bytes

    default_headers are sent only if a response has no header with the same
    name. chunk_length is used to slice bytes bodies when they have to be
    sent chunked (response has transfer-encoding: chunked set by hand)
    """

    protocol: str = field(default='1.1')
    default_headers: Headers = field(
        default_factory=lambda: Headers(
            server='surge'
        )
    )
    count_content_length: bool = field(default=True)
    chunk_length: int = field(default=4096)
