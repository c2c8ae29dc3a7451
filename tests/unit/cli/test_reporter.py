"""Unit tests for the console reporter."""

import httpx

from moodlog.cli.reporter import create_page_and_report, format_failure, format_success


class TestFormatting:

    def test_success_line(self):
        assert format_success("X") == "Success! Page created with ID: X"

    def test_success_line_without_id(self):
        assert format_success(None) == "Success! Page created with ID: "

    def test_failure_line(self):
        assert format_failure("HTTP Error 400: M") == "Failed to create page: HTTP Error 400: M"


class TestCreatePageAndReport:
    """Tests for end-to-end reporting against a mocked transport."""

    def test_success(self, capsys, mock_transport):
        ok = create_page_and_report("テスト", "成功", transport=mock_transport(200, {"id": "test_success_id"}))

        assert ok is True
        assert "Success! Page created with ID: test_success_id" in capsys.readouterr().out

    def test_success_without_id_in_body(self, capsys, mock_transport):
        ok = create_page_and_report("テスト", "成功", transport=mock_transport(200, {"object": "page"}))

        assert ok is True
        assert capsys.readouterr().out == "Success! Page created with ID: \n"

    def test_api_error(self, capsys, mock_transport):
        ok = create_page_and_report("テスト", "エラー", transport=mock_transport(400, {"message": "Bad Request"}))

        assert ok is False
        assert "Failed to create page: HTTP Error 400: Bad Request" in capsys.readouterr().out

    def test_non_json_error(self, capsys, mock_transport):
        create_page_and_report("テスト", "エラー", transport=mock_transport(502, text="Bad Gateway"))

        assert "Failed to create page: HTTP Error 502: Unknown error" in capsys.readouterr().out

    def test_transport_error(self, capsys):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        ok = create_page_and_report("テスト", "気持ち", transport=httpx.MockTransport(refuse))

        assert ok is False
        assert "Failed to create page: Connection refused" in capsys.readouterr().out

    def test_configuration_error(self, capsys, monkeypatch, mock_transport):
        from moodlog.core.config import get_settings

        monkeypatch.delenv("NOTION_DATABASE_ID")
        get_settings.cache_clear()

        ok = create_page_and_report("テスト", "気持ち", transport=mock_transport(200, {"id": "x"}))

        assert ok is False
        assert "Failed to create page: NOTION_DATABASE_ID is not set" in capsys.readouterr().out
