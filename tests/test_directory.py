import httpx
import pytest

from chikitsamitra.config.settings import Settings
from chikitsamitra.services.directory_service import DirectoryClient
from chikitsamitra.services.directory_transport import (
    AppsScriptTransport,
    ProxyTransport,
    build_transport,
)

from conftest import EXEC_URL, apps_script_directory, sample_booking, sheet_handler


async def test_states_are_sorted_distinct_and_trimmed(directory):
    assert await directory.list_states() == ["Bihar", "Maharashtra"]


async def test_list_states_is_idempotent(directory):
    first = await directory.list_states()
    second = await directory.list_states()
    assert first == second


async def test_districts_are_filtered_to_the_state(directory):
    assert await directory.list_districts("Bihar") == ["Gaya", "Patna"]
    assert await directory.list_districts("maharashtra") == ["Mumbai", "Pune"]


async def test_empty_state_returns_nothing_without_a_request():
    calls = []
    directory = apps_script_directory(sheet_handler(calls=calls))

    assert await directory.list_districts("") == []
    assert await directory.list_hospitals("   ") == []
    assert calls == []


async def test_hospitals_for_state_and_district(directory):
    assert await directory.list_hospitals("Bihar") == ["AIIMS Patna", "PMCH", "Sadar Hospital Gaya"]
    assert await directory.list_hospitals("Bihar", "patna") == ["AIIMS Patna", "PMCH"]
    assert await directory.list_hospitals("Maharashtra", "Pune") == ["Sassoon General"]
    assert await directory.list_hospitals("Bihar", "Nalanda") == []


async def test_apps_script_request_parameters():
    calls = []
    directory = apps_script_directory(sheet_handler(calls=calls), api_key="secret")

    await directory.list_districts("Bihar")

    request = calls[0]
    assert str(request.url).startswith(EXEC_URL)
    assert request.url.params["sheet"] == "Hospitals"
    assert request.url.params["state"] == "Bihar"
    assert request.url.params["key"] == "secret"
    assert request.headers["cache-control"] == "no-store"


async def test_scheme_audiences_put_all_india_first(directory):
    assert await directory.list_scheme_audiences() == ["All India", "Bihar", "Kerala", "Maharashtra"]


async def test_schemes_for_audience_include_all_india(directory):
    schemes = await directory.list_schemes("bihar")
    titles = [scheme.title for scheme in schemes]
    assert titles == ["Mukhyamantri Chikitsa Sahayata", "Ayushman Bharat", "Janani Suraksha Yojana"]
    assert all(s.target_audience in ("Bihar", "All India") for s in schemes)


@pytest.mark.parametrize("audience", [None, "", "All India", "all india"])
async def test_schemes_without_audience_return_everything(directory, audience):
    assert len(await directory.list_schemes(audience)) == 5


async def test_faq_search(directory):
    faqs = await directory.search_faqs("PM-JAY")
    assert faqs[0].question == "What is PM-JAY?"
    assert faqs[1].question == "Question"
    assert faqs[1].answer == "Answer without question"


async def test_faq_search_ignores_blank_and_short_queries():
    calls = []
    directory = apps_script_directory(sheet_handler(calls=calls))

    assert await directory.search_faqs("") == []
    assert await directory.search_faqs("   ") == []
    assert await directory.search_faqs("a") == []
    assert calls == []


@pytest.mark.parametrize("status_code, body", [
    (500, {"text": "boom"}),
    (200, {"text": "<html>not json</html>"}),
    (200, {"json": {"error": "not a list"}}),
])
async def test_bad_responses_degrade_to_empty(status_code, body):
    directory = apps_script_directory(lambda request: httpx.Response(status_code, **body))

    assert await directory.list_states() == []
    assert await directory.list_districts("Bihar") == []
    assert await directory.list_scheme_audiences() == []
    assert await directory.list_schemes("Bihar") == []
    assert await directory.search_faqs("fever") == []


async def test_network_error_degrades_to_empty():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    directory = apps_script_directory(handler)
    assert await directory.list_states() == []
    assert await directory.list_hospitals("Bihar", "Patna") == []


async def test_missing_exec_url_returns_empty():
    directory = DirectoryClient(AppsScriptTransport(""))
    assert await directory.list_states() == []


async def test_apps_script_does_not_mirror(directory):
    booking = sample_booking()
    assert directory.mirrors_bookings is False
    assert await directory.mirror_booking(booking) is False


def proxy_directory(handler) -> DirectoryClient:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DirectoryClient(ProxyTransport("http://proxy.test/", client=client))


async def test_proxy_transport_paths_and_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, dict(request.url.params)))
        if request.url.path == "/api/schemes":
            return httpx.Response(200, json=[{"Target Audience": "Bihar", "Scheme Name": "CM Aid"}])
        if request.url.path == "/api/faqs":
            return httpx.Response(200, json=[{"question": "Q", "answer": "A"}])
        if request.url.path == "/api/scheme-states":
            return httpx.Response(200, json=["Kerala", "All India"])
        return httpx.Response(200, json=["Patna", "Gaya", "Patna"])

    directory = proxy_directory(handler)

    assert await directory.list_states() == ["Gaya", "Patna"]
    assert await directory.list_districts("Bihar") == ["Gaya", "Patna"]
    assert await directory.list_hospitals("Bihar", "Patna") == ["Gaya", "Patna"]
    assert await directory.list_scheme_audiences() == ["All India", "Kerala"]
    schemes = await directory.list_schemes("Bihar")
    assert schemes[0].title == "CM Aid"
    faqs = await directory.search_faqs("fever")
    assert faqs[0].answer == "A"

    assert seen == [
        ("GET", "/api/states", {}),
        ("GET", "/api/districts", {"state": "Bihar"}),
        ("GET", "/api/hospitals", {"state": "Bihar", "district": "Patna"}),
        ("GET", "/api/scheme-states", {}),
        ("GET", "/api/schemes", {"state": "Bihar"}),
        ("GET", "/api/faqs", {"query": "fever"}),
    ]


async def test_proxy_mirrors_bookings():
    posted = []

    def handler(request: httpx.Request) -> httpx.Response:
        posted.append(request)
        return httpx.Response(201, json={"success": True})

    directory = proxy_directory(handler)
    booking = sample_booking()

    assert directory.mirrors_bookings is True
    assert await directory.mirror_booking(booking) is True
    assert posted[0].method == "POST"
    assert posted[0].url.path == "/api/book_appointment"
    assert b'"reference":"CM-000001"' in posted[0].content.replace(b" ", b"")


async def test_proxy_mirror_failure_returns_false():
    directory = proxy_directory(lambda request: httpx.Response(500))
    booking = sample_booking()
    assert await directory.mirror_booking(booking) is False


def test_build_transport_follows_settings():
    assert isinstance(build_transport(Settings(directory_transport="proxy")), ProxyTransport)
    apps_script = build_transport(Settings(directory_transport="apps_script", apps_script_exec_url=EXEC_URL))
    assert isinstance(apps_script, AppsScriptTransport)
    assert apps_script.exec_url == EXEC_URL
