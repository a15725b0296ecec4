from abc import ABC, abstractmethod
from collections.abc import Generator


class BaseStringGenerator(ABC):
    """Common interface for objects that synthesize strings accepted by a regex."""

    @abstractmethod
    def __init__(self, config: "BaseStringGeneratorConfig") -> None:
        """
        Store the generator configuration.

        :param config: Settings shared by every pattern this generator handles.
        """
        self.config = config

    @abstractmethod
    def generate(self, regex_pattern: str, count: int) -> Generator[str, None, None]:
        """
        Lazily produce strings the pattern accepts.

        :param regex_pattern: Pattern text in Python ``re`` syntax.
        :param count: How many strings to attempt.
        :return: A generator of matching strings.
        """


class BaseStringGeneratorConfig(ABC):
    """Marker base for the settings object of a string generator."""

    @abstractmethod
    def __init__(self, *args: object, **kwargs: object) -> None:
        """
        Build the configuration; subclasses validate their own keyword options.
        """
