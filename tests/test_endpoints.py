import pytest

from multiapi import ErrorKind, ExecResult, TranslationResult, UnexpectedResponseShape
from multiapi.adapters import endpoints
from multiapi.core.config import AppSettings
from multiapi.adapters.session import ApiSession
from multiapi import DecodeError


# /execlangs


def test_get_exec_langs(session, fake_api):
    fake_api.route("/execlangs", json_body={"langs": "python, go, rust"})

    assert endpoints.get_exec_langs(session) == "python, go, rust"
    assert fake_api.last_request.url.host == "api.test"
    assert fake_api.last_request.url.path == "/execlangs"
    assert fake_api.last_params == {}


def test_get_exec_langs_wrong_type(session, fake_api):
    fake_api.route("/execlangs", json_body={"langs": ["python"]})

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.get_exec_langs(session)

    assert info.value.kind is ErrorKind.UNEXPECTED_RESPONSE_SHAPE
    assert info.value.endpoint == "/execlangs"
    assert info.value.field == "langs"


# /exec


def test_exec_code_errors_variant(session, fake_api):
    fake_api.route(
        "/exec",
        json_body={"Language": "python", "Code": "print(1)", "Results": "1", "Errors": ""},
    )

    report = endpoints.exec_code(session, lang="python", code="print(1)")

    assert report == "Language: python\n\nCode: print(1)\n\nResults: 1\n\nErrors: "
    assert "Stats" not in report
    assert fake_api.last_params == {"lang": "python", "code": "print(1)"}


def test_exec_code_stats_variant(session, fake_api):
    fake_api.route(
        "/exec",
        json_body={"Language": "python", "Code": "x", "Results": "ok", "Stats": "5ms"},
    )

    report = endpoints.exec_code(session, lang="python", code="x")

    assert report == "Language: python\n\nCode: x\n\nResults: ok\n\nStats: 5ms"
    assert "Errors" not in report


def test_exec_errors_key_wins_over_stats(session, fake_api):
    fake_api.route(
        "/exec",
        json_body={"Language": "go", "Code": "x", "Results": "", "Errors": "boom", "Stats": "1ms"},
    )

    result = endpoints.fetch_exec_result(session, lang="go", code="x")

    assert isinstance(result, ExecResult)
    assert result.errors == "boom"
    assert result.stats is None


def test_exec_unknown_language_returns_langs(session, fake_api):
    fake_api.route("/exec", json_body={"langs": "python, go"})

    assert endpoints.exec_code(session, lang="cobol", code="x") == "python, go"


def test_exec_without_any_known_field(session, fake_api):
    fake_api.route("/exec", json_body={"detail": "rate limited"})

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.exec_code(session, lang="python", code="x")

    assert info.value.field == "langs"


@pytest.mark.parametrize(
    "body, field",
    [
        ({"Language": "python", "Code": "x", "Results": "ok", "Errors": None}, "Errors"),
        ({"Language": "python", "Code": "x", "Results": "ok", "Stats": 5}, "Stats"),
        ({"Language": 3, "Code": "x", "Results": "ok", "Errors": ""}, "Language"),
        ({"Code": "x", "Results": "ok", "Stats": "1ms"}, "Language"),
    ],
)
def test_exec_malformed_report_fields(session, fake_api, body, field):
    fake_api.route("/exec", json_body=body)

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.exec_code(session, lang="python", code="x")

    assert info.value.endpoint == "/exec"
    assert info.value.field == field


# /ocr


def test_ocr_text(session, fake_api):
    fake_api.route("/ocr", json_body={"ocr": "HELLO"})

    assert endpoints.ocr(session, url="https://img.test/a b.png") == "HELLO"
    assert fake_api.last_params == {"url": "https://img.test/a b.png"}


def test_ocr_error_is_prefixed(session, fake_api):
    fake_api.route("/ocr", json_body={"error": "bad url"})

    assert endpoints.ocr(session, url="nope") == "Error: bad url"


def test_ocr_without_text_or_error(session, fake_api):
    fake_api.route("/ocr", content=b"<html>gateway timeout</html>")

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.ocr(session, url="x")

    assert info.value.field == "error"


# /tr


def test_translate_report(session, fake_api):
    fake_api.route(
        "/tr",
        json_body={"text": "hello world", "from_language": "es", "to_language": "en"},
    )

    report = endpoints.translate(session, text="hola mundo", from_lang="es", to_lang="en")

    assert report == "Text: hello world\n\nFrom language: es\n\nTo language: en"
    assert fake_api.last_params == {"text": "hola mundo", "fromlang": "es", "lang": "en"}


def test_translate_error_is_returned_as_is(session, fake_api):
    fake_api.route("/tr", json_body={"error": "unsupported language"})

    assert endpoints.translate(session, text="x", from_lang="xx", to_lang="en") == "unsupported language"


def test_fetch_translation_model(session, fake_api):
    fake_api.route(
        "/tr",
        json_body={"text": "bonjour", "from_language": "en", "to_language": "fr", "extra": 1},
    )

    result = endpoints.fetch_translation(session, text="hello", from_lang="en", to_lang="fr")

    assert result == TranslationResult(text="bonjour", from_language="en", to_language="fr")


def test_translate_missing_field(session, fake_api):
    fake_api.route("/tr", json_body={"text": "bonjour", "from_language": "en"})

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.translate(session, text="hello", from_lang="en", to_lang="fr")

    assert info.value.field == "to_language"


# /ud


def test_urban_dictionary_results(session, fake_api):
    results = [{"definition": "a greeting", "example": "yo!"}, "raw"]
    fake_api.route("/ud", json_body={"results": results})

    assert endpoints.urban_dictionary(session, query="yo") == results
    assert fake_api.last_params == {"query": "yo"}


def test_urban_dictionary_invalid_json(session, fake_api):
    fake_api.route("/ud", content=b"{broken")

    with pytest.raises(UnexpectedResponseShape) as info:
        endpoints.urban_dictionary(session, query="yo")

    assert info.value.field == "results"


# /print


def test_webshot_returns_raw_bytes(session, fake_api):
    fake_api.route("/print", content=b"\x89PNG\r\n\x1a\nbinary")

    data = endpoints.webshot(session, url="https://example.com", width="800", height="600")

    assert data == b"\x89PNG\r\n\x1a\nbinary"
    assert fake_api.last_params == {"url": "https://example.com", "width": "800", "height": "600"}


@pytest.mark.parametrize("width, height", [("", "720"), ("1280", ""), ("", ""), ("640", "")])
def test_webshot_missing_dimension_resets_both(session, fake_api, width, height):
    fake_api.route("/print", content=b"img")

    endpoints.webshot(session, url="https://example.com", width=width, height=height)

    assert fake_api.last_params["width"] == "1280"
    assert fake_api.last_params["height"] == "720"


def test_webshot_numeric_dimensions(session, fake_api):
    fake_api.route("/print", content=b"img")

    endpoints.webshot(session, url="https://example.com", width=1024, height=768)

    assert fake_api.last_params["width"] == "1024"
    assert fake_api.last_params["height"] == "768"


# /random


@pytest.mark.parametrize("number", [7, 7.0])
def test_random_number(session, fake_api, number):
    fake_api.route("/random", json_body={"number": number})

    value = endpoints.random_number(session, minimum=1, maximum=10)

    assert value == 7
    assert type(value) is int
    assert fake_api.last_params == {"min": "1", "max": "10"}


@pytest.mark.parametrize("number", ["7", 7.5, True, None])
def test_random_number_rejects_non_integers(session, fake_api, number):
    fake_api.route("/random", json_body={"number": number})

    with pytest.raises(UnexpectedResponseShape):
        endpoints.random_number(session, minimum="1", maximum="10")


# /pypi, /paste, /get_paste


def test_pypi_search_returns_mapping(session, fake_api):
    body = {"name": "httpx", "version": "0.27.0", "info": {"license": "BSD"}}
    fake_api.route("/pypi", json_body=body)

    assert endpoints.pypi_search(session, package="httpx") == body
    assert fake_api.last_params == {"package": "httpx"}


def test_pypi_search_invalid_json_is_empty_mapping(session, fake_api):
    fake_api.route("/pypi", content=b"Internal Server Error", status_code=500)

    assert endpoints.pypi_search(session, package="httpx") == {}


def test_paste_and_get_paste(session, fake_api):
    fake_api.route("/paste", json_body={"id": "abc123", "url": "https://api.test/p/abc123"})
    fake_api.route("/get_paste", json_body={"content": "hi", "title": "t", "author": "me"})

    created = endpoints.paste(session, content="hi there", title="t", author="me")
    assert created == {"id": "abc123", "url": "https://api.test/p/abc123"}
    assert fake_api.last_params == {"content": "hi there", "title": "t", "author": "me"}

    fetched = endpoints.get_paste(session, paste_id="abc123")
    assert fetched["content"] == "hi"
    assert fake_api.last_params == {"paste": "abc123"}


def test_strict_json_propagates_decode_error(fake_api):
    settings = AppSettings(base_url="https://api.test", strict_json=True)
    fake_api.route("/pypi", content=b"not json")
    session = ApiSession(settings, transport=fake_api.transport(settings))

    with pytest.raises(DecodeError):
        endpoints.pypi_search(session, package="httpx")
