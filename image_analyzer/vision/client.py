"""VisionClient — abstract base for structured image analysis backends."""
from abc import ABC, abstractmethod

from image_analyzer.analysis.request import AnalysisRequest


class VisionClient(ABC):

    def __init__(self, api_key: str, model: str) -> None:
        match api_key:
            case None | "":
                raise ValueError(f"{type(self).__name__} requires an API key")
            case _:
                pass
        self._api_key = api_key
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    @abstractmethod
    async def analyze(self, request: AnalysisRequest) -> str:
        """Send one analysis request and return the raw JSON text. Raises on failure."""
        ...
