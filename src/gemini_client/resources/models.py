"""Model metadata resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gemini_client.requests import ListModelsRequest, RetrieveModelRequest
from gemini_client.responses import ListModelResponse, RetrieveModelResponse
from gemini_client.types import ModelType

if TYPE_CHECKING:
    from gemini_client.transport import Transporter


class Models:
    """Lists and retrieves the models available through the API."""

    def __init__(self, transporter: Transporter) -> None:
        self.transporter = transporter

    def list(self, page_size: int | None = None, next_page_token: str | None = None) -> ListModelResponse:
        """List one page of models.

        Args:
            page_size: Maximum number of models per page
            next_page_token: Token from a previous page's ``next_page_token``
        """
        response = self.transporter.request(ListModelsRequest(page_size, next_page_token))
        return ListModelResponse.from_dict(response.data)

    def retrieve(self, model: ModelType | str) -> RetrieveModelResponse:
        """Get information about a specific model."""
        response = self.transporter.request(RetrieveModelRequest(model))
        return RetrieveModelResponse.from_dict(response.data)
