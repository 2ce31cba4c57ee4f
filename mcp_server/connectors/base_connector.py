from abc import ABC, abstractmethod


class BaseConnector(ABC):
    """
    Base class for connectors that pull source content for the tools
    """

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """
        Retrieve raw content from the source

        Args:
            url: Location of the content

        Returns:
            The content as text
        """
        pass

    @abstractmethod
    def extract_text(self, content: str) -> str:
        """
        Convert raw content into flattened visible text

        Args:
            content: Raw content returned by fetch

        Returns:
            Plain text with whitespace collapsed
        """
        pass
