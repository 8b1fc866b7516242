from .reader import Reader
from .implementation.text_reader import TextReader
