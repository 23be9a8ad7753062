"""Multi-turn chat on top of a generative model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gemini_client.types import Content, Part, PartLike, Role
from gemini_client.types.content import to_part

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gemini_client.resources.generative_model import GenerativeModel
    from gemini_client.responses import GenerateContentResponse, StreamResponse
    from gemini_client.types import ModelType


class ChatSession:
    """Conversation that resends its history on every turn.

    A turn is appended to :attr:`history` only once the model has answered,
    so a failed call leaves the history untouched.

    Example:
        >>> chat = client.gemini_pro().start_chat()
        >>> chat.send_message("Hello, my name is Ada").text
        >>> chat.send_message("What is my name?").text
    """

    def __init__(self, chat: GenerativeModel, history: list[Content] | None = None) -> None:
        self.chat = chat
        self.history: list[Content] = list(history or [])

    @property
    def model(self) -> ModelType | str:
        return self.chat.model

    def send_message(self, *parts: PartLike | Content) -> GenerateContentResponse:
        """Send one user turn and record the model's reply.

        Every argument contributes to a single user message; a ``Content``
        argument contributes all of its parts.
        """
        message = _user_message(parts)
        response = self.chat.generate_content(*self.history, message)

        self.history.append(message)
        if response.candidates and response.candidates[0].content is not None:
            self.history.append(_as_model_turn(response.candidates[0].content))

        return response

    def stream_send_message(self, *parts: PartLike | Content) -> ChatStreamResponse:
        """Send one user turn and stream the reply.

        The request is sent immediately. The turn is recorded after the
        stream has been read to the end; closing it early records nothing.
        """
        message = _user_message(parts)
        stream = self.chat.stream_generate_content(*self.history, message)
        return ChatStreamResponse(self, message, stream)


class ChatStreamResponse:
    """Single-use stream of a chat reply that owns the underlying stream.

    Example:
        >>> with chat.stream_send_message("Tell me a story") as stream:
        ...     for response in stream:
        ...         print(response.text, end="")
    """

    def __init__(
        self,
        session: ChatSession,
        message: Content,
        stream: StreamResponse[GenerateContentResponse],
    ) -> None:
        self._session = session
        self._message = message
        self._stream = stream

    @property
    def consumed(self) -> bool:
        return self._stream.consumed

    def __iter__(self) -> Iterator[GenerateContentResponse]:
        return self._record(iter(self._stream))

    def _record(self, responses: Iterator[GenerateContentResponse]) -> Iterator[GenerateContentResponse]:
        reply: list[Part] = []
        try:
            for response in responses:
                if response.candidates and response.candidates[0].content is not None:
                    reply.extend(response.candidates[0].content.parts)
                yield response
        finally:
            self._stream.close()

        self._session.history.append(self._message)
        if reply:
            self._session.history.append(Content(parts=reply, role=Role.MODEL))

    def close(self) -> None:
        """Release the underlying stream without reading the rest."""
        self._stream.close()

    def __enter__(self) -> ChatStreamResponse:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def _user_message(parts: tuple[PartLike | Content, ...]) -> Content:
    if len(parts) == 1 and isinstance(parts[0], Content):
        return parts[0]

    message: list[Part] = []
    for part in parts:
        if isinstance(part, Content):
            message.extend(part.parts)
        else:
            message.append(to_part(part))
    return Content(parts=message, role=Role.USER)


def _as_model_turn(content: Content) -> Content:
    if content.role is None:
        return content.model_copy(update={"role": Role.MODEL})
    return content
