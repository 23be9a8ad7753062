"""Tests for the testing fake."""

import pytest

from gemini_client.errors import FakeResponsesExhaustedError, RemoteError
from gemini_client.resources import ChatSession, EmbeddingModel, GenerativeModel, Models
from gemini_client.responses import (
    BatchEmbedContentsResponse,
    CountTokensResponse,
    EmbedContentResponse,
    GenerateContentResponse,
    ListModelResponse,
    RetrieveModelResponse,
)
from gemini_client.testing import ClientFake, TestRequest
from gemini_client.types import GenerationConfig, ModelType, TaskType


class TestClientFakeResponses:
    """Tests for the response queue."""

    def test_returns_queued_response(self) -> None:
        """Test responses are returned in order."""
        first = GenerateContentResponse.fake({"candidates": [{"content": {"parts": [{"text": "1"}]}}]})
        second = GenerateContentResponse.fake({"candidates": [{"content": {"parts": [{"text": "2"}]}}]})
        fake = ClientFake([first, second])

        assert fake.gemini_pro().generate_content("a") is first
        assert fake.gemini_pro().generate_content("b") is second

    def test_add_responses(self) -> None:
        """Test responses can be queued after construction."""
        fake = ClientFake()
        fake.add_responses([CountTokensResponse.fake()])

        assert fake.gemini_pro().count_tokens("Hello").total_tokens == 8

    def test_exhausted(self) -> None:
        """Test an empty queue raises."""
        fake = ClientFake()
        with pytest.raises(FakeResponsesExhaustedError):
            fake.gemini_pro().generate_content("Hello")

    def test_exhausted_call_is_still_recorded(self) -> None:
        """Test the call is logged before the queue is checked."""
        fake = ClientFake()
        with pytest.raises(FakeResponsesExhaustedError):
            fake.gemini_pro().generate_content("Hello")

        fake.assert_sent(GenerativeModel)

    def test_raises_queued_exception(self) -> None:
        """Test an exception instance is raised instead of returned."""
        error = RemoteError("quota exceeded", status_code=429, status="RESOURCE_EXHAUSTED")
        fake = ClientFake([error])

        with pytest.raises(RemoteError) as exc_info:
            fake.gemini_pro().generate_content("Hello")
        assert exc_info.value is error

    def test_every_resource(self) -> None:
        """Test every action of every resource answers from the queue."""
        fake = ClientFake(
            [
                ListModelResponse.fake(),
                RetrieveModelResponse.fake(),
                EmbedContentResponse.fake(),
                BatchEmbedContentsResponse.fake(),
                GenerateContentResponse.fake(),
            ]
        )

        assert len(fake.models().list().models) == 2
        assert fake.models().retrieve(ModelType.GEMINI_PRO).model.name == "models/gemini-pro"
        assert len(fake.embedding_model().embed_content("a").embedding.values) == 4
        assert len(fake.embedding_model().batch_embed_contents("a", "b").embeddings) == 2
        assert fake.chat().send_message("Hi").text == "This is a fake response from the model."

    def test_fake_stream(self) -> None:
        """Test a queued stream is iterated by the caller."""
        fake = ClientFake([GenerateContentResponse.fake_stream()])

        stream = fake.gemini_pro().stream_generate_content("Hello")

        assert [response.text for response in stream] == [
            "Once upon",
            " a time",
            " there was a fake stream.",
        ]


class TestClientFakeRecording:
    """Tests for the request log."""

    def test_request_entry(self) -> None:
        """Test recorded fields."""
        fake = ClientFake([EmbedContentResponse.fake()])

        fake.embedding_model().embed_content("Hello", task_type=TaskType.CLUSTERING)

        assert fake.requests == [
            TestRequest(
                resource="EmbeddingModel",
                model=ModelType.EMBEDDING,
                method="embed_content",
                args=("Hello", TaskType.CLUSTERING, None),
            )
        ]

    def test_configuration_is_not_recorded(self) -> None:
        """Test with_* calls and start_chat do not enter the log."""
        fake = ClientFake()

        fake.gemini_pro().with_generation_config(GenerationConfig(temperature=0.1)).start_chat()

        fake.assert_nothing_sent()

    def test_resource_types(self) -> None:
        """Test fake resources keep the real resource interfaces."""
        fake = ClientFake()

        assert isinstance(fake.models(), Models)
        assert isinstance(fake.gemini_pro_vision(), GenerativeModel)
        assert isinstance(fake.embedding_model(), EmbeddingModel)
        assert isinstance(fake.chat(), ChatSession)
        assert fake.chat(ModelType.GEMINI_1_5_PRO).model == ModelType.GEMINI_1_5_PRO


class TestClientFakeAssertions:
    """Tests for assert_sent, assert_not_sent and assert_nothing_sent."""

    @pytest.fixture
    def fake(self) -> ClientFake:
        fake = ClientFake([GenerateContentResponse.fake(), GenerateContentResponse.fake()])
        fake.gemini_pro().generate_content("Hello")
        fake.generative_model("models/gemini-1.0-pro-001").generate_content("Bye")
        return fake

    def test_assert_sent_by_class(self, fake: ClientFake) -> None:
        """Test matching by resource class."""
        fake.assert_sent(GenerativeModel)

    def test_assert_sent_by_name(self, fake: ClientFake) -> None:
        """Test matching by resource name and by method name."""
        fake.assert_sent("GenerativeModel")
        fake.assert_sent("generate_content")

    def test_assert_sent_fails(self, fake: ClientFake) -> None:
        """Test the failure message names the resource."""
        with pytest.raises(AssertionError, match=r"The expected \[EmbeddingModel\] request was not sent."):
            fake.assert_sent(EmbeddingModel)

    def test_assert_sent_with_model(self, fake: ClientFake) -> None:
        """Test filtering by model."""
        fake.assert_sent(GenerativeModel, ModelType.GEMINI_PRO)
        fake.assert_sent(GenerativeModel, "models/gemini-pro")
        fake.assert_sent(GenerativeModel, "models/gemini-1.0-pro-001")
        with pytest.raises(AssertionError):
            fake.assert_sent(GenerativeModel, ModelType.GEMINI_PRO_VISION)

    def test_assert_sent_with_callback(self, fake: ClientFake) -> None:
        """Test the callback sees method and arguments."""
        fake.assert_sent(
            GenerativeModel,
            callback=lambda method, args: method == "generate_content" and args == ("Bye",),
        )
        with pytest.raises(AssertionError):
            fake.assert_sent(GenerativeModel, callback=lambda method, args: args == ("Nope",))

    def test_filters_are_conjunctive(self, fake: ClientFake) -> None:
        """Test model and callback must match the same call."""
        with pytest.raises(AssertionError):
            fake.assert_sent(
                GenerativeModel,
                ModelType.GEMINI_PRO,
                lambda method, args: args == ("Bye",),
            )

    def test_assert_sent_times(self, fake: ClientFake) -> None:
        """Test exact call counts."""
        fake.assert_sent(GenerativeModel, times=2)
        fake.assert_sent(GenerativeModel, ModelType.GEMINI_PRO, times=1)

    def test_assert_sent_int_callback_is_times(self, fake: ClientFake) -> None:
        """Test an int in the callback position counts calls."""
        fake.assert_sent(GenerativeModel, None, 2)

    def test_assert_sent_times_fails(self, fake: ClientFake) -> None:
        """Test the count failure message."""
        with pytest.raises(
            AssertionError,
            match=r"The expected \[GenerativeModel\] resource was sent 2 times instead of 3 times.",
        ):
            fake.assert_sent(GenerativeModel, times=3)

    def test_assert_sent_zero_times(self) -> None:
        """Test times=0 passes when nothing matched."""
        ClientFake().assert_sent(Models, times=0)

    def test_assert_not_sent(self, fake: ClientFake) -> None:
        """Test the negative assertion."""
        fake.assert_not_sent(Models)
        fake.assert_not_sent(GenerativeModel, ModelType.GEMINI_1_5_FLASH)
        with pytest.raises(AssertionError, match=r"The unexpected \[GenerativeModel\] request was sent."):
            fake.assert_not_sent(GenerativeModel)

    def test_assert_nothing_sent(self, fake: ClientFake) -> None:
        """Test the message lists every recorded resource."""
        ClientFake().assert_nothing_sent()
        with pytest.raises(
            AssertionError,
            match="The following requests were sent unexpectedly: GenerativeModel, GenerativeModel",
        ):
            fake.assert_nothing_sent()

    def test_chat_calls_are_recorded_on_chat_session(self) -> None:
        """Test chat messages are logged under ChatSession."""
        fake = ClientFake([GenerateContentResponse.fake()])

        fake.chat().send_message("Hi")

        fake.assert_sent(ChatSession, ModelType.GEMINI_PRO, times=1)
        fake.assert_sent("send_message")
        fake.assert_not_sent(GenerativeModel)
