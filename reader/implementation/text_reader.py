from ..reader import Reader


class TextReader(Reader):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: str) -> str:
        with open(path, encoding=self.encoding) as file:
            return file.read()
