from .rng import RandomSourceProtocol
from .text import TextPipelineProtocol
from .walker import WalkerProtocol

__all__ = [
    'RandomSourceProtocol',
    'TextPipelineProtocol',
    'WalkerProtocol',
]
