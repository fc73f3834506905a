import httpx

from shared.llm_adapter.errors import describe_exception, extract_error_detail, mask_secret


class TestExtractErrorDetail:
    def test_nested_message(self):
        assert extract_error_detail({"error": {"message": "invalid x-api-key"}}) == "invalid x-api-key"

    def test_gemini_shape(self):
        body = {"error": {"code": 400, "message": "API key not valid.", "status": "INVALID_ARGUMENT"}}
        assert extract_error_detail(body) == "API key not valid."

    def test_fallback_when_missing(self):
        assert extract_error_detail({}) == "Unknown error"
        assert extract_error_detail({"error": "flat string"}) == "Unknown error"
        assert extract_error_detail({"error": {"message": ""}}) == "Unknown error"
        assert extract_error_detail([1, 2]) == "Unknown error"
        assert extract_error_detail(None) == "Unknown error"

    def test_custom_fallback(self):
        assert extract_error_detail({}, fallback="n/a") == "n/a"


class TestMaskSecret:
    def test_masks_every_occurrence_keeping_tail(self):
        text = "bad key AIzaLongSecret9876 (AIzaLongSecret9876)"
        assert mask_secret(text, "AIzaLongSecret9876") == "bad key ****9876 (****9876)"

    def test_short_secret_is_fully_hidden(self):
        assert mask_secret("key=abc123", "abc123") == "key=****"

    def test_empty_secret_leaves_text_alone(self):
        assert mask_secret("nothing to hide", "") == "nothing to hide"

    def test_masks_query_string_encoded_form(self):
        text = "GET /v1beta/models?key=abc%2Fdef%2Bghi%3Djkl123 failed"
        masked = mask_secret(text, "abc/def+ghi=jkl123")

        assert "abc%2Fdef" not in masked
        assert masked == "GET /v1beta/models?key=****l123 failed"


class TestDescribeException:
    def test_uses_exception_text(self):
        assert describe_exception(httpx.ConnectError("Connection refused")) == "Connection refused"

    def test_empty_text_falls_back(self):
        assert describe_exception(RuntimeError()) == "Unknown error"

    def test_masks_credential(self):
        exc = httpx.ConnectError("failed GET /v1beta/models?key=AIzaLongSecret9876")
        assert "AIzaLongSecret9876" not in describe_exception(exc, "AIzaLongSecret9876")
