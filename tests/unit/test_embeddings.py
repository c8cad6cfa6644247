"""
Test suite for embedding providers and the provider factory.

System role: Verification of embedding adapters and error translation
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from chunk_search.boundary.embeddings.factory import build_embedding_provider
from chunk_search.boundary.embeddings.fake_provider import HashingEmbeddingProvider
from chunk_search.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from chunk_search.configs.embedding import EmbeddingSettings
from chunk_search.core.exceptions import EmbeddingError


class TestLangChainEmbeddingProvider:
    """Test suite for LangChainEmbeddingProvider."""

    @pytest.mark.asyncio
    async def test_embed_should_return_vector_of_configured_dimension(self) -> None:
        """Test a LangChain model's vector passes through."""
        provider = LangChainEmbeddingProvider(DeterministicFakeEmbedding(size=8), dimension=8)

        vector = await provider.embed("hello world")

        assert len(vector) == 8
        assert vector == await provider.embed("hello world")

    @pytest.mark.asyncio
    async def test_embed_should_reject_wrong_dimension(self) -> None:
        """Test a vector of another length raises EmbeddingError."""
        provider = LangChainEmbeddingProvider(DeterministicFakeEmbedding(size=4), dimension=8)

        with pytest.raises(EmbeddingError) as exc_info:
            await provider.embed("hello")

        assert exc_info.value.details == {"expected": 8, "actual": 4}

    @pytest.mark.asyncio
    async def test_embed_should_wrap_provider_errors(self) -> None:
        """Test SDK exceptions become EmbeddingError with the cause kept."""
        # Arrange
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(side_effect=TimeoutError("provider timeout"))
        provider = LangChainEmbeddingProvider(embeddings, dimension=8)

        # Act
        with pytest.raises(EmbeddingError) as exc_info:
            await provider.embed("hello")

        # Assert
        assert "provider timeout" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, TimeoutError)


class TestHashingEmbeddingProvider:
    """Test suite for the offline hashing provider."""

    @pytest.mark.asyncio
    async def test_embed_should_be_deterministic_and_normalised(self) -> None:
        provider = HashingEmbeddingProvider(dimension=16)

        first = await provider.embed("Hybrid search")
        second = await provider.embed("hybrid SEARCH")

        assert first == second
        assert sum(value * value for value in first) == pytest.approx(1.0)
        assert provider.calls == ["Hybrid search", "hybrid SEARCH"]

    @pytest.mark.asyncio
    async def test_embed_should_return_zero_vector_without_words(self) -> None:
        provider = HashingEmbeddingProvider(dimension=4)

        assert await provider.embed("...") == [0.0, 0.0, 0.0, 0.0]

    def test_init_should_reject_non_positive_dimension(self) -> None:
        with pytest.raises(ValueError):
            HashingEmbeddingProvider(dimension=0)


class TestBuildEmbeddingProvider:
    """Test suite for build_embedding_provider()."""

    def test_build_should_return_fake_provider(self) -> None:
        provider = build_embedding_provider(EmbeddingSettings(provider="fake", dimension=12))

        assert isinstance(provider, HashingEmbeddingProvider)
        assert provider.dimension == 12

    def test_build_should_configure_openai_dimensions(self) -> None:
        """Test OpenAI embeddings get the model, dimension and key."""
        config = EmbeddingSettings(
            provider="openai", model="text-embedding-3-large", dimension=3072, api_key="sk-test"
        )

        with patch("langchain_openai.OpenAIEmbeddings") as mock_cls:
            provider = build_embedding_provider(config)

        mock_cls.assert_called_once_with(
            model="text-embedding-3-large", dimensions=3072, api_key="sk-test"
        )
        assert isinstance(provider, LangChainEmbeddingProvider)
        assert provider.dimension == 3072

    def test_build_should_configure_gemini_output_dimensionality(self) -> None:
        """Test Gemini embeddings get the pinned output dimensionality."""
        config = EmbeddingSettings(
            provider="google", model="models/gemini-embedding-001", dimension=768, api_key="key"
        )

        with patch(
            "chunk_search.boundary.embeddings.gemini_embeddings.FixedDimensionEmbeddings"
        ) as mock_cls:
            provider = build_embedding_provider(config)

        mock_cls.assert_called_once_with(
            model="models/gemini-embedding-001",
            output_dimensionality=768,
            google_api_key="key",
        )
        assert provider.dimension == 768
