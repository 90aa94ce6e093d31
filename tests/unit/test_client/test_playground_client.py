"""
test_playground_client.py - Playground Client 테스트

규칙:
- single flight: 요청 중 컨트롤 비활성화, 끝나면 (실패 포함) 다시 활성화
- 로컬 검사로 불필요한 왕복 방지
- envelope 해석: error > result > unexpected
"""

from unittest.mock import MagicMock

import httpx
import pytest

from src.client.playground import (
    MSG_REQUEST_IN_FLIGHT,
    ClientResult,
    PlaygroundClient,
    read_envelope,
)

# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def api(client) -> PlaygroundClient:
    """TestClient 위에서 동작하는 PlaygroundClient."""
    return PlaygroundClient(http=client, prefix="/ktemplate")


def fake_response(payload=None, error: Exception | None = None) -> MagicMock:
    response = MagicMock()
    if error is not None:
        response.json.side_effect = error
    else:
        response.json.return_value = payload
    return response


# =============================================================================
# read_envelope
# =============================================================================

class TestReadEnvelope:
    """envelope 해석."""

    def test_result(self):
        assert read_envelope({"result": "3"}) == ClientResult(ok=True, text="3", sent=True)

    def test_error(self):
        assert read_envelope({"error": "bad"}) == ClientResult(ok=False, text="bad", sent=True)

    def test_error_wins_over_result(self):
        assert read_envelope({"error": "bad", "result": "x"}).ok is False

    @pytest.mark.parametrize("payload", [{}, {"other": 1}, [], "text", None])
    def test_unexpected(self, payload):
        result = read_envelope(payload)

        assert result.ok is False
        assert result.text == "unexpected response from the server"


class TestClientResultDisplay:
    """결과 영역 표시."""

    def test_success_display(self):
        assert ClientResult.success("3").display == "3"

    def test_error_display(self):
        assert ClientResult.failure("boom").display == "error!\nboom"


# =============================================================================
# Local checks (서버 호출 없음)
# =============================================================================

class TestLocalChecks:
    """서버 왕복 전 로컬 검사."""

    @pytest.fixture
    def http(self) -> MagicMock:
        return MagicMock(spec=httpx.Client)

    @pytest.fixture
    def local(self, http) -> PlaygroundClient:
        return PlaygroundClient(http=http)

    def test_empty_source_render(self, local, http):
        result = local.render("", "{}")

        assert result == ClientResult(ok=True, text="", sent=False)
        http.post.assert_not_called()

    def test_empty_source_disasm(self, local, http):
        assert local.disassemble("").text == ""
        http.post.assert_not_called()

    def test_source_too_big(self, local, http):
        result = local.render("x" * 2048, "{}")

        assert result.ok is False
        assert result.text == "template source is too big"
        http.post.assert_not_called()

    def test_disasm_source_too_big(self, local, http):
        assert local.disassemble("x" * 2048).text == "template source is too big"
        http.post.assert_not_called()

    def test_data_too_big(self, local, http):
        data = '{"a": "' + "x" * 600 + '"}'

        result = local.render("{{ a }}", data)

        assert result.text == "template data is too big"
        http.post.assert_not_called()

    def test_data_at_limit_is_sent(self, local, http):
        http.post.return_value = fake_response({"result": "ok"})
        data = '{"a": "' + "x" * (512 - 9) + '"}'
        assert len(data) == 512

        assert local.render("{{ a }}", data).ok is True

    def test_malformed_data_json(self, local, http):
        result = local.render("{{ a }}", "{not json")

        assert result.ok is False
        assert "Expecting property name" in result.text
        http.post.assert_not_called()


# =============================================================================
# Single flight
# =============================================================================

class TestSingleFlight:
    """요청 중 컨트롤 비활성화."""

    def test_controls_disabled_during_request(self):
        http = MagicMock(spec=httpx.Client)
        observed: list[bool] = []
        pc = PlaygroundClient(http=http)

        def post(*args, **kwargs):
            observed.append(pc.controls_enabled)
            return fake_response({"result": "ok"})

        http.post.side_effect = post

        assert pc.controls_enabled is True
        pc.render("x", "{}")

        assert observed == [False]
        assert pc.controls_enabled is True

    def test_second_request_while_in_flight_is_refused(self):
        http = MagicMock(spec=httpx.Client)
        pc = PlaygroundClient(http=http)
        nested: list[ClientResult] = []

        def post(*args, **kwargs):
            nested.append(pc.disassemble("y"))
            return fake_response({"result": "first"})

        http.post.side_effect = post

        first = pc.render("x", "{}")

        assert first.text == "first"
        assert nested == [ClientResult.failure(MSG_REQUEST_IN_FLIGHT)]
        assert http.post.call_count == 1

    def test_controls_reenabled_after_transport_error(self):
        http = MagicMock(spec=httpx.Client)
        http.post.side_effect = httpx.ConnectError("connection refused")
        pc = PlaygroundClient(http=http)

        result = pc.render("x", "{}")

        assert result.ok is False
        assert result.sent is True
        assert "connection refused" in result.text
        assert pc.controls_enabled is True

    def test_non_json_response(self):
        http = MagicMock(spec=httpx.Client)
        http.post.return_value = fake_response(error=ValueError("Expecting value"))
        pc = PlaygroundClient(http=http)

        result = pc.disassemble("x")

        assert result.text == "unexpected response from the server"
        assert pc.controls_enabled is True


# =============================================================================
# Against the app
# =============================================================================

class TestAgainstApp:
    """실제 앱과 통신."""

    def test_render(self, api):
        result = api.render("{{ 1 + 2 }}", "{}")

        assert result == ClientResult(ok=True, text="3", sent=True)

    def test_render_with_data(self, api):
        assert api.render("{{ a.b }}", '{"a": {"b": 7}}').display == "7"

    def test_compilation_error(self, api):
        result = api.render("{{ }}", "{}")

        assert result.ok is False
        assert result.display.startswith("error!\nmain.template:1:")

    def test_disassemble(self, api):
        result = api.disassemble("{{ 1 }}")

        assert result.ok is True
        assert result.text.startswith("root:")

    def test_info(self, api):
        assert api.info().startswith("jinja2 ")

    def test_unknown_route_is_unexpected(self, client):
        pc = PlaygroundClient(http=client, prefix="/ktemplate/api/nope")

        result = pc.render("x", "{}")

        assert result.text == "unexpected response from the server"

    def test_owned_http_client_is_closed(self):
        pc = PlaygroundClient(base_url="http://127.0.0.1:1")
        http = pc._http

        with pc:
            pass

        assert http.is_closed
