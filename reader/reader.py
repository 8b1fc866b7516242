from abc import ABC, abstractmethod


class Reader(ABC):
    @abstractmethod
    def read(self, path: str) -> str:
        ...

    @staticmethod
    def read_from_file(path: str) -> str:
        if path.endswith(".txt"):
            from .implementation.text_reader import TextReader
            return TextReader().read(path)

        raise NotImplementedError("Reader is not implemented yet for provided format.")

    @staticmethod
    def read_from_prompt(prompt: str = "Input text:") -> str:
        print(prompt)
        return input()
