from .codec import Codec
from .implementation.delimited import SymbolCodec, build_codec
from .implementation.baseline import BaselineCodec
