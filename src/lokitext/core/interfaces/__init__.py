from .codec import CodecProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .search import MultiPatternSearchProtocol, SubstringSearchProtocol, TextLike

__all__ = [
    'CodecProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MultiPatternSearchProtocol',
    'SubstringSearchProtocol',
    'TextLike',
]
