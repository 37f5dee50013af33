from md_to_notion.services import action
from md_to_notion.services.action import USAGE_HINT, handle_request, main


def test_success_returns_children():
    result = handle_request({"md": "# Hello\n- a"}, method="POST", content_type="application/json")
    assert result.status_code == 200
    assert result.headers == {"Content-Type": "application/json"}
    assert [b["type"] for b in result.body["children"]] == ["heading_1", "bulleted_list_item"]


def test_method_and_content_type_are_optional():
    result = handle_request({"md": "text"})
    assert result.status_code == 200


def test_non_post_rejected_with_allow_header():
    result = handle_request({"md": "x"}, method="get")
    assert result.status_code == 405
    assert result.headers["Allow"] == "POST"
    assert result.headers["Content-Type"] == "application/json"
    assert result.body["error"].startswith("Method not allowed.")
    assert result.body["error"].endswith(USAGE_HINT)


def test_method_check_runs_before_payload_check():
    assert handle_request({}, method="PUT").status_code == 405


def test_non_json_content_type_rejected():
    result = handle_request({"md": "x"}, method="POST", content_type="text/plain")
    assert result.status_code == 415
    assert "Unsupported Media Type" in result.body["error"]


def test_json_content_type_with_charset_accepted():
    result = handle_request({"md": "x"}, method="POST", content_type="application/json; charset=utf-8")
    assert result.status_code == 200


def test_missing_or_empty_md_rejected():
    for payload in (None, {}, {"md": ""}, {"md": None}, ["md"]):
        result = handle_request(payload, method="POST")
        assert result.status_code == 400
        assert result.body["error"].startswith("Bad Request: No markdown content provided")
        assert "children" not in result.body


def test_non_string_md_rejected_as_wrong_type():
    for value in (42, ["# a"], {"text": "x"}):
        result = handle_request({"md": value}, method="POST")
        assert result.status_code == 400
        assert result.body["error"].startswith('Bad Request: The "md" field must be a string.')
        assert "children" not in result.body


def test_unexpected_failure_becomes_500(monkeypatch):
    def boom(_md):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(action, "markdown_to_notion", boom)
    result = handle_request({"md": "x"}, method="POST")
    assert result.status_code == 500
    assert result.body == {"error": "Internal Server Error: kaboom"}


def test_serverless_main_reads_ow_metadata():
    ok = main({"md": "## Hi", "__ow_method": "post", "__ow_headers": {"content-type": "application/json"}})
    assert ok["statusCode"] == 200
    assert ok["body"]["children"][0]["type"] == "heading_2"
    assert ok["headers"]["Content-Type"] == "application/json"

    rejected = main({"md": "## Hi", "__ow_method": "post", "__ow_headers": {"content-type": "text/html"}})
    assert rejected["statusCode"] == 415

    assert main({})["statusCode"] == 400
