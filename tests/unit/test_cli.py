import json

import pytest

from newsdesk.cli import build_parser, main
from newsdesk.client.credentials import FileCredentialStore

JSON_HEADERS = {"Content-Type": "application/json"}


@pytest.fixture(autouse=True)
def quiet_logging(mocker):
    mocker.patch("newsdesk.cli.configure_logging")


@pytest.fixture
def credentials_file(tmp_path, monkeypatch):
    path = tmp_path / "credentials.json"
    monkeypatch.setenv("NEWSDESK_CREDENTIALS_FILE", str(path))
    return path


@pytest.fixture
def logged_in(credentials_file, jwt_factory):
    FileCredentialStore(str(credentials_file)).set({"access": jwt_factory(), "refresh": "refresh-1"})
    return credentials_file


def run(endpoint, *args):
    return main(["--endpoint", endpoint, *args])


class TestCli:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert "Newsdesk" in capsys.readouterr().out

    def test_login_stores_tokens(self, endpoint, credentials_file, mock_req, capsys):
        mock_req.post(
            f"{endpoint}/auth/login/",
            json={"user": {"email": "reader@example.com"}, "tokens": {"access": "a1", "refresh": "r1"}},
            headers=JSON_HEADERS,
        )

        assert run(endpoint, "login", "reader@example.com", "--password", "pw") == 0

        assert json.loads(credentials_file.read_text()) == {"access": "a1", "refresh": "r1"}
        assert "Logged in as reader@example.com" in capsys.readouterr().out

    def test_login_prompts_for_password(self, endpoint, credentials_file, mock_req, mocker):
        getpass = mocker.patch("newsdesk.cli.getpass.getpass", return_value="typed")
        login = mock_req.post(
            f"{endpoint}/auth/login/", json={"tokens": {"access": "a1", "refresh": "r1"}}, headers=JSON_HEADERS
        )

        run(endpoint, "login", "reader@example.com")

        getpass.assert_called_once()
        assert login.last_request.json()["password"] == "typed"

    def test_login_failure_exits_nonzero(self, endpoint, credentials_file, mock_req, capsys):
        mock_req.post(f"{endpoint}/auth/login/", status_code=400, json={"message": "Bad password"}, headers=JSON_HEADERS)

        assert run(endpoint, "login", "reader@example.com", "--password", "x") == 1
        assert "Bad password" in capsys.readouterr().err
        assert not credentials_file.exists()

    def test_whoami(self, endpoint, logged_in, mock_req, capsys):
        mock_req.get(f"{endpoint}/auth/profile/", json={"user": {"email": "reader@example.com"}}, headers=JSON_HEADERS)

        assert run(endpoint, "whoami") == 0
        assert "reader@example.com" in capsys.readouterr().out

    def test_whoami_logged_out(self, endpoint, credentials_file, mock_req, capsys):
        assert run(endpoint, "whoami") == 1
        assert "Not logged in" in capsys.readouterr().out
        assert mock_req.call_count == 0

    def test_logout_removes_credentials(self, endpoint, logged_in, mock_req):
        mock_req.post(f"{endpoint}/auth/logout/", status_code=205, text="")

        assert run(endpoint, "logout") == 0
        assert not logged_in.exists()

    def test_news(self, endpoint, logged_in, mock_req, capsys):
        news = mock_req.get(
            f"{endpoint}/news/",
            json={
                "success": True,
                "articles": [{"id": 4, "headline": "Budget passed", "is_important": True}],
                "pagination": {"current_page": 1, "total_pages": 3, "total_articles": 13},
            },
            headers=JSON_HEADERS,
        )

        assert run(endpoint, "news", "--tag", "economy", "--page", "1") == 0

        out = capsys.readouterr().out
        assert "[4] Budget passed" in out
        assert "page 1/3, 13 articles" in out
        assert news.last_request.qs == {"tag": ["economy"]}

    def test_invalid_filter_exits_nonzero(self, endpoint, logged_in, capsys):
        assert run(endpoint, "news", "--per-page", "0") == 1
        assert "per_page" in capsys.readouterr().err

    def test_upload(self, endpoint, logged_in, mock_req, tmp_path, capsys):
        pdf = tmp_path / "paper.pdf"
        pdf.write_bytes(b"%PDF-1.7")
        mock_req.post(
            f"{endpoint}/upload/process/",
            json={"success": True, "duplicate": True, "message": "Already processed"},
            headers=JSON_HEADERS,
        )

        assert run(endpoint, "upload", str(pdf)) == 0
        assert "Already uploaded: Already processed" in capsys.readouterr().out

    def test_upload_missing_file_exits_nonzero(self, endpoint, logged_in, mock_req, tmp_path, capsys):
        assert run(endpoint, "upload", str(tmp_path / "missing.pdf")) == 1
        assert "missing.pdf" in capsys.readouterr().err
        assert mock_req.call_count == 0

    def test_status(self, endpoint, logged_in, mock_req, capsys):
        mock_req.get(
            f"{endpoint}/processing-status/",
            json={"uploads": [{"filename": "paper.pdf", "task_status": "SUCCESS", "processed_pages": 8, "total_pages": 8}]},
            headers=JSON_HEADERS,
        )

        assert run(endpoint, "status") == 0
        assert "paper.pdf: SUCCESS 8/8 pages" in capsys.readouterr().out

    def test_parser_rejects_unknown_read_status(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["news", "--read-status", "skimmed"])
