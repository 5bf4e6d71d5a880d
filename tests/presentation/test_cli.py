"""Tests for CLI module."""

import json

import httpx
import pytest
from unittest.mock import patch, AsyncMock, MagicMock

from rootly_alert.composition_root import create_container
from rootly_alert.domain.value_objects.entity_kind import EntityKind
from rootly_alert.presentation.cli.cli import async_main, build_parser


def _make_container(alert_id="alert-123", entity_id="user-1", **overrides):
    """Create a mock container with sensible defaults."""
    container = MagicMock()
    container.trigger_alert = MagicMock()
    container.trigger_alert.execute = AsyncMock(return_value=alert_id)
    container.rootly_adapter = MagicMock()
    container.rootly_adapter.lookup_id = AsyncMock(return_value=entity_id)
    container.rootly_adapter.aclose = AsyncMock()
    for key, value in overrides.items():
        setattr(container, key, value)
    return container


class TestCLIHelp:
    """Test all help outputs (no adapter dependencies)."""

    @pytest.mark.asyncio
    async def test_no_command_prints_help(self, capsys):
        with patch("sys.argv", ["rootly-alert"]):
            await async_main()
        captured = capsys.readouterr()
        assert "Create Rootly alerts" in captured.out

    @pytest.mark.asyncio
    async def test_help_flag(self):
        with patch("sys.argv", ["rootly-alert", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()

    @pytest.mark.asyncio
    async def test_create_help(self):
        with patch("sys.argv", ["rootly-alert", "create", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()

    @pytest.mark.asyncio
    async def test_lookup_help(self):
        with patch("sys.argv", ["rootly-alert", "lookup", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()

    @pytest.mark.asyncio
    async def test_verbose_flag(self):
        with patch("sys.argv", ["rootly-alert", "--verbose"]):
            await async_main()

    def test_lookup_kinds(self):
        parser = build_parser()
        args = parser.parse_args(["lookup", "-k", "escalation-policy", "Primary"])
        assert args.kind == "escalation-policy"
        assert args.name == "Primary"

    def test_lookup_rejects_unknown_kind(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["lookup", "-k", "team", "x"])


class TestCreateCommand:
    @pytest.mark.asyncio
    async def test_create_from_flags(self, capsys):
        container = _make_container()
        with patch("sys.argv", [
            "rootly-alert", "create",
            "--api-key", "key",
            "--summary", "Disk full",
            "--services", "api,worker",
            "--set-as-noise",
        ]), patch(
            "rootly_alert.presentation.cli.cli.create_container",
            return_value=container,
        ) as factory:
            await async_main()

        assert factory.call_args.args[0] == "key"
        inputs = container.trigger_alert.execute.await_args.args[0]
        assert inputs.summary == "Disk full"
        assert inputs.services == "api,worker"
        assert inputs.set_as_noise is True
        container.rootly_adapter.aclose.assert_awaited_once()

        captured = capsys.readouterr()
        assert "alert-id=alert-123" in captured.out
        assert "[+] Created alert alert-123" in captured.out

    @pytest.mark.asyncio
    async def test_flags_override_action_inputs(self, monkeypatch):
        monkeypatch.setenv("INPUT_SUMMARY", "from runner")
        monkeypatch.setenv("INPUT_GROUPS", "oncall")
        container = _make_container()
        with patch("sys.argv", ["rootly-alert", "create", "--summary", "from flag"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ):
            await async_main()

        inputs = container.trigger_alert.execute.await_args.args[0]
        assert inputs.summary == "from flag"
        assert inputs.groups == "oncall"

    @pytest.mark.asyncio
    async def test_output_written_to_github_output(self, tmp_path, monkeypatch):
        output_file = tmp_path / "github_output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
        container = _make_container(alert_id="alert-999")
        with patch("sys.argv", ["rootly-alert", "create"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ):
            await async_main()

        assert output_file.read_text() == "alert-id=alert-999\n"

    @pytest.mark.asyncio
    async def test_alert_not_created(self, capsys):
        container = _make_container(alert_id="")
        with patch("sys.argv", ["rootly-alert", "create"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ):
            await async_main()

        captured = capsys.readouterr()
        assert "alert-id=\n" in captured.out
        assert "[-] Alert was not created." in captured.out

    @pytest.mark.asyncio
    async def test_failure_exits_with_status_one(self, capsys):
        container = _make_container()
        container.trigger_alert.execute = AsyncMock(
            side_effect=ValueError("Invalid notification target type")
        )
        with patch("sys.argv", ["rootly-alert", "--github-actions", "create"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ), pytest.raises(SystemExit) as exc_info:
            await async_main()

        assert exc_info.value.code == 1
        container.rootly_adapter.aclose.assert_awaited_once()
        captured = capsys.readouterr()
        assert "::error::Invalid notification target type" in captured.out
        assert "alert-id" not in captured.out


class TestLookupCommand:
    @pytest.mark.asyncio
    async def test_lookup_prints_id(self, capsys):
        container = _make_container(entity_id="svc-42")
        with patch("sys.argv", ["rootly-alert", "lookup", "-k", "service", "api"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ):
            await async_main()

        container.rootly_adapter.lookup_id.assert_awaited_once_with(
            EntityKind.SERVICE, "api"
        )
        assert capsys.readouterr().out.strip() == "svc-42"

    @pytest.mark.asyncio
    async def test_lookup_not_found(self, capsys):
        container = _make_container(entity_id="")
        with patch("sys.argv", ["rootly-alert", "lookup", "-k", "group", "nobody"]), \
             patch(
                 "rootly_alert.presentation.cli.cli.create_container",
                 return_value=container,
             ), pytest.raises(SystemExit, match="1"):
            await async_main()

        assert "[-] No group found for 'nobody'" in capsys.readouterr().out


class TestCreateAgainstApi:
    """Runs the create command through the real adapter over a mock transport."""

    @pytest.mark.asyncio
    async def test_full_pipeline(self, capsys):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.method == "POST":
                return httpx.Response(201, json={"data": {"id": "alert-777"}})
            resource = request.url.path.rsplit("/", 1)[-1]
            return httpx.Response(200, json={"data": [{"id": f"{resource}-1"}]})

        def factory(api_key, config):
            client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
            return create_container(api_key, config, client=client)

        with patch("sys.argv", [
            "rootly-alert", "create",
            "--api-key", "secret",
            "--summary", "Disk full",
            "--notification-target-type", "escalationpolicy",
            "--notification-target", "Primary",
            "--services", "api",
            "--labels", "env:prod",
        ]), patch("rootly_alert.presentation.cli.cli.create_container", side_effect=factory):
            await async_main()

        assert "alert-id=alert-777" in capsys.readouterr().out
        assert all(r.headers["Authorization"] == "Bearer secret" for r in requests)

        body = json.loads(requests[-1].content)
        attributes = body["data"]["attributes"]
        assert attributes["summary"] == "Disk full"
        assert attributes["notification_target_type"] == "EscalationPolicy"
        assert attributes["notification_target_id"] == "escalation_policies-1"
        assert attributes["alert_urgency_id"] == "alert_urgencies-1"
        assert attributes["service_ids"] == ["services-1"]
        assert attributes["labels"] == [{"key": "env", "value": "prod"}]
