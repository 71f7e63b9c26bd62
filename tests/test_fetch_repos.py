"""Tests for the console entry point."""
import pytest
from aiohttp import test_utils, web

import fetch_repos
from src.infrastructure.config import FetcherConfig
from tests.helpers import repo_payload


def _app(response: web.Response) -> web.Application:
    async def handler(request: web.Request) -> web.Response:
        return response

    app = web.Application()
    app.router.add_get("/users/{username}/repos", handler)
    return app


@pytest.mark.asyncio
async def test_main_prints_ranked_list(capsys):
    payload = [repo_payload(1, "small", 1), repo_payload(2, "big", 20, language=None)]
    async with test_utils.TestServer(_app(web.json_response(payload))) as server:
        config = FetcherConfig(api_base_url=f"http://{server.host}:{server.port}")
        status = await fetch_repos.main("octocat", config)

    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out[2:] == ["big  Stars: 20  —", "small  Stars: 1  Python"]


@pytest.mark.asyncio
async def test_main_reports_failure(capsys):
    response = web.json_response({"message": "Not Found"}, status=404)
    async with test_utils.TestServer(_app(response)) as server:
        config = FetcherConfig(api_base_url=f"http://{server.host}:{server.port}")
        status = await fetch_repos.main("ghost", config)

    assert status == 1
    assert "(no repositories)" in capsys.readouterr().out
