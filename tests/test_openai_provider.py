import json
import os
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx
from openai import APIConnectionError

from resume_analyzer.ai.providers.openai_provider import OpenAIProvider
from resume_analyzer.ai.registry import ProviderRegistry
from resume_analyzer.core.errors import ConfigurationError, ProviderError, UnavailableError


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _fake_client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class OpenAIProviderTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        patcher = patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test-secret-123"})
        patcher.start()
        self.addCleanup(patcher.stop)
        for name in (
            "AI_MODEL",
            "OPENAI_MODEL",
            "OPENAI_RESPONSE_FORMAT",
            "OPENAI_TEMPERATURE",
            "OPENAI_MAX_OUTPUT_TOKENS",
            "OPENAI_TIMEOUT_S",
            "OPENAI_BASE_URL",
        ):
            os.environ.pop(name, None)

    def test_availability_follows_the_environment(self):
        provider = OpenAIProvider()
        self.assertTrue(provider.is_available())

        del os.environ["OPENAI_API_KEY"]
        self.assertFalse(provider.is_available())

        os.environ["OPENAI_API_KEY"] = "your_openai_key_here"
        self.assertFalse(provider.is_available())

        os.environ["OPENAI_API_KEY"] = "sk-again"
        self.assertTrue(provider.is_available())

    async def test_missing_credential_raises_configuration_error_without_calling(self):
        create = AsyncMock()
        provider = OpenAIProvider(client=_fake_client(create))
        del os.environ["OPENAI_API_KEY"]

        with self.assertRaises(ConfigurationError):
            await provider.analyze("resume", "job")
        create.assert_not_awaited()

    async def test_registry_flips_without_reregistration(self):
        payload = {"summary": "Fit", "keywordMatch": 80}
        provider = OpenAIProvider(client=_fake_client(AsyncMock(return_value=_completion(json.dumps(payload)))))
        registry = ProviderRegistry({"openai": provider})

        del os.environ["OPENAI_API_KEY"]
        with self.assertRaises(UnavailableError):
            await registry.analyze("openai", "resume", "job")

        os.environ["OPENAI_API_KEY"] = "sk-restored"
        result = await registry.analyze("openai", "resume", "job")
        self.assertEqual(result.keyword_match, 80)

    async def test_single_call_with_fixed_settings(self):
        payload = {
            "summary": "Good fit",
            "strengths": ["Python"],
            "improvements": [],
            "keywordMatch": 77,
            "skillGaps": ["Go"],
            "recommendations": ["Add Go"],
            "optimizedContent": "",
        }
        create = AsyncMock(return_value=_completion(json.dumps(payload)))
        provider = OpenAIProvider(client=_fake_client(create))

        result = await provider.analyze("Resume about Python", "Job wants Go")

        create.assert_awaited_once()
        kwargs = create.await_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4o-mini")
        self.assertEqual(kwargs["temperature"], 0.3)
        self.assertEqual(kwargs["max_tokens"], 2000)
        self.assertNotIn("response_format", kwargs)
        self.assertEqual([m["role"] for m in kwargs["messages"]], ["system", "user"])
        self.assertIn("Resume about Python", kwargs["messages"][1]["content"])
        self.assertIn("Job wants Go", kwargs["messages"][1]["content"])
        self.assertEqual(result.keyword_match, 77)
        self.assertEqual(list(result.skill_gaps), ["Go"])

    async def test_json_mode_is_opt_in(self):
        os.environ["OPENAI_RESPONSE_FORMAT"] = "json"
        create = AsyncMock(return_value=_completion("{}"))
        provider = OpenAIProvider(client=_fake_client(create))
        await provider.analyze("resume", "job")
        self.assertEqual(create.await_args.kwargs["response_format"], {"type": "json_object"})

    async def test_prose_response_goes_through_fallback(self):
        create = AsyncMock(return_value=_completion("Strengths:\n- Clear writing\n\nMatch: 55%"))
        provider = OpenAIProvider(client=_fake_client(create))
        result = await provider.analyze("resume", "job")
        self.assertEqual(list(result.strengths), ["Clear writing"])
        self.assertEqual(result.keyword_match, 55)

    async def test_transport_failure_becomes_provider_error_without_secret(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        create = AsyncMock(
            side_effect=APIConnectionError(message="connection reset for key sk-test-secret-123", request=request)
        )
        provider = OpenAIProvider(client=_fake_client(create))

        with self.assertRaises(ProviderError) as ctx:
            await provider.analyze("resume", "job")
        self.assertIn("connection reset", str(ctx.exception))
        self.assertNotIn("sk-test-secret-123", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, APIConnectionError)

    async def test_empty_completion_is_provider_error(self):
        provider = OpenAIProvider(client=_fake_client(AsyncMock(return_value=_completion(""))))
        with self.assertRaises(ProviderError):
            await provider.analyze("resume", "job")

    async def test_malformed_transport_response_is_provider_error(self):
        provider = OpenAIProvider(client=_fake_client(AsyncMock(return_value=SimpleNamespace())))
        with self.assertRaises(ProviderError):
            await provider.analyze("resume", "job")


    async def test_builds_single_attempt_client_and_rebuilds_on_key_change(self):
        built = []

        def make_client(**kwargs):
            create = AsyncMock(return_value=_completion("{}"))
            client = _fake_client(create)
            client.close = AsyncMock()
            built.append((kwargs, client))
            return client

        provider = OpenAIProvider()
        with patch("resume_analyzer.ai.providers.openai_provider.AsyncOpenAI", side_effect=make_client):
            await provider.analyze("resume", "job")
            await provider.analyze("resume", "job")
            self.assertEqual(len(built), 1)
            kwargs = built[0][0]
            self.assertEqual(kwargs["max_retries"], 0)
            self.assertEqual(kwargs["timeout"], 30.0)
            self.assertEqual(kwargs["api_key"], "sk-test-secret-123")

            os.environ["OPENAI_API_KEY"] = "sk-rotated"
            await provider.analyze("resume", "job")

        self.assertEqual(len(built), 2)
        self.assertEqual(built[1][0]["api_key"], "sk-rotated")
        built[0][1].close.assert_awaited_once()
        built[1][1].close.assert_not_awaited()

        await provider.aclose()
        built[1][1].close.assert_awaited_once()

    async def test_injected_client_is_left_open(self):
        client = _fake_client(AsyncMock(return_value=_completion("{}")))
        client.close = AsyncMock()
        provider = OpenAIProvider(client=client)
        await provider.analyze("resume", "job")
        await provider.aclose()
        client.close.assert_not_awaited()

if __name__ == "__main__":
    unittest.main()
