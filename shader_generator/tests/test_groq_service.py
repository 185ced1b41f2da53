"""Tests for the Groq service (outbound calls faked, no network)."""

import json

import httpx
import pytest

from shader_generator.config import GROQ_API_URL, Settings
from shader_generator.services.groq_service import (
    ConfigError,
    ShaderGenerationError,
    TransportError,
    UpstreamError,
    build_messages,
    build_payload,
    extract_content,
    generate_shader,
    strip_code_fences,
)
from shader_generator.tests.fake_groq import API_KEY, FakeGroq, completion

SETTINGS = Settings(groq_api_key=API_KEY)


class TestStripCodeFences:
    def test_glsl_fence(self):
        assert strip_code_fences("```glsl\nvoid main(){}\n```") == "void main(){}"

    def test_bare_fence(self):
        assert strip_code_fences("```\nvoid main(){}\n```") == "void main(){}"

    def test_other_language_tag(self):
        assert strip_code_fences("```c++\nint x;\n```") == "int x;"

    def test_no_fence(self):
        assert strip_code_fences("  void main(){}\n") == "void main(){}"

    def test_fences_in_the_middle(self):
        text = "Sure!\n```glsl\nfloat a;\n```\nand\n```glsl\nfloat b;\n```"
        result = strip_code_fences(text)
        assert "```" not in result
        assert "float a;" in result
        assert "float b;" in result

    def test_code_on_fence_line_kept(self):
        assert strip_code_fences("```void main(){}```") == "void main(){}"

    def test_tag_with_trailing_space(self):
        assert strip_code_fences("```glsl  \r\nfloat a;\r\n```") == "float a;"

    def test_tag_at_end_of_text(self):
        assert strip_code_fences("float a;\n```glsl") == "float a;"

    def test_single_backticks_kept(self):
        assert strip_code_fences("// uses `u_time`") == "// uses `u_time`"


class TestExtractContent:
    def test_content(self):
        assert extract_content(completion("void main(){}")) == "void main(){}"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"choices": []},
            {"choices": [{}]},
            {"choices": [{"message": {}}]},
            {"choices": [{"message": {"content": None}}]},
            {"choices": None},
            [],
            "text",
        ],
    )
    def test_absent_path(self, payload):
        assert extract_content(payload) == ""


class TestBuildPayload:
    def test_messages(self):
        messages = build_messages("a pulsing red circle")
        assert [m["role"] for m in messages] == ["system", "user"]
        assert "WebGL 1.0" in messages[0]["content"]
        assert "Ray-marched 3D Cube" in messages[0]["content"]
        assert 'description: "a pulsing red circle"' in messages[1]["content"]

    def test_payload(self):
        payload = build_payload("x")
        assert payload["model"] == "llama-3.3-70b-versatile"
        assert payload["temperature"] == 0.7
        assert len(payload["messages"]) == 2


class TestGenerateShader:
    @pytest.mark.asyncio
    async def test_success(self):
        groq = FakeGroq(
            lambda request: httpx.Response(
                200, json=completion("```glsl\nvoid main(){}\n```")
            )
        )
        async with httpx.AsyncClient(transport=httpx.MockTransport(groq)) as client:
            result = await generate_shader("a pulsing red circle", SETTINGS, client)

        assert result == "void main(){}"
        sent = json.loads(groq.requests[0].content)
        assert sent["messages"][1]["content"].count("a pulsing red circle") == 1

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_request(self):
        groq = FakeGroq()
        async with httpx.AsyncClient(transport=httpx.MockTransport(groq)) as client:
            with pytest.raises(ConfigError, match="API key not configured"):
                await generate_shader("x", Settings(groq_api_key=""), client)
        assert groq.requests == []

    @pytest.mark.asyncio
    async def test_upstream_error(self):
        groq = FakeGroq(lambda request: httpx.Response(503, text="Service Unavailable"))
        async with httpx.AsyncClient(transport=httpx.MockTransport(groq)) as client:
            with pytest.raises(UpstreamError) as exc_info:
                await generate_shader("x", SETTINGS, client)

        err = exc_info.value
        assert err.status_code == 503
        assert err.body == "Service Unavailable"
        assert str(err) == "Groq API error: 503 - Service Unavailable"

    @pytest.mark.asyncio
    async def test_non_json_success_body(self):
        groq = FakeGroq(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        async with httpx.AsyncClient(transport=httpx.MockTransport(groq)) as client:
            with pytest.raises(UpstreamError, match="200"):
                await generate_shader("x", SETTINGS, client)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        def slow(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(FakeGroq(slow))) as client:
            with pytest.raises(TransportError, match="ConnectTimeout") as exc_info:
                await generate_shader("x", SETTINGS, client)

        assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)
        assert isinstance(exc_info.value, ShaderGenerationError)

    @pytest.mark.asyncio
    async def test_redirect_loop_is_transport_error(self):
        groq = FakeGroq(
            lambda request: httpx.Response(307, headers={"Location": GROQ_API_URL})
        )
        transport = httpx.MockTransport(groq)
        async with httpx.AsyncClient(
            transport=transport, follow_redirects=True, max_redirects=2
        ) as client:
            with pytest.raises(TransportError, match="TooManyRedirects"):
                await generate_shader("x", SETTINGS, client)
